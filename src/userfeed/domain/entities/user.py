"""User entity and its owned value records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Geolocation:
    """Geographic position of an address.

    Attributes:
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
    """

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Address:
    """Postal address of a user.

    Attributes:
        street: Street name and number.
        suite: Suite or apartment.
        city: City name.
        zip_code: Postal code.
        geolocation: Position of the address, if known.
    """

    street: str
    suite: str
    city: str
    zip_code: str
    geolocation: Geolocation | None = None


@dataclass(frozen=True)
class Company:
    """Employer of a user.

    Attributes:
        name: Company name.
        catchphrase: Marketing catchphrase.
        bs: Business slogan.
    """

    name: str
    catchphrase: str
    bs: str


@dataclass(frozen=True)
class User:
    """User record as returned by the remote API.

    Attributes:
        name: Display name.
        username: Handle.
        email: Email address.
        address: Postal address, if provided.
        company: Employer, if provided.
    """

    name: str
    username: str
    email: str
    address: Address | None = None
    company: Company | None = None
