"""Domain repositories."""

from userfeed.domain.repositories.user_repository import UserRepository

__all__ = ["UserRepository"]
