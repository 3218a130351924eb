"""Domain entities."""

from userfeed.domain.entities.user import Address, Company, Geolocation, User

__all__ = ["Address", "Company", "Geolocation", "User"]
