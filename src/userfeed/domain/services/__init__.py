"""Domain services."""

from userfeed.domain.services.generic_encoder import encode_users, to_generic
from userfeed.domain.services.user_formatter import format_user, format_users

__all__ = ["encode_users", "format_user", "format_users", "to_generic"]
