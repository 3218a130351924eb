"""Use cases."""

from userfeed.application.use_cases.dump_users import DumpUsersUseCase

__all__ = ["DumpUsersUseCase"]
