"""HTTP implementation of UserRepository."""

import logging
import math
from typing import Any

from userfeed.domain.entities import Address, Company, Geolocation, User
from userfeed.infrastructure.http.client import WebServiceClient
from userfeed.infrastructure.http.exceptions import DecodingError

logger = logging.getLogger(__name__)


def _require_mapping(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodingError(f"'{path}' must be an object")
    return value


def _optional_mapping(data: dict[str, Any], key: str, path: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    return _require_mapping(value, f"{path}.{key}")


def _require_string(data: dict[str, Any], key: str, path: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise DecodingError(f"'{path}.{key}' must be a string")
    return value


def _require_coordinate(data: dict[str, Any], key: str, path: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise DecodingError(f"'{path}.{key}' must be a number")
    try:
        number = float(value)
    except (ValueError, OverflowError) as e:
        raise DecodingError(f"'{path}.{key}' must be a number") from e
    if not math.isfinite(number):
        raise DecodingError(f"'{path}.{key}' must be a finite number")
    return number


def decode_geolocation(data: dict[str, Any], path: str) -> Geolocation:
    return Geolocation(
        latitude=_require_coordinate(data, "lat", path),
        longitude=_require_coordinate(data, "lng", path),
    )


def decode_address(data: dict[str, Any], path: str) -> Address:
    geo_data = _optional_mapping(data, "geo", path)
    return Address(
        street=_require_string(data, "street", path),
        suite=_require_string(data, "suite", path),
        city=_require_string(data, "city", path),
        zip_code=_require_string(data, "zipcode", path),
        geolocation=(
            decode_geolocation(geo_data, f"{path}.geo") if geo_data is not None else None
        ),
    )


def decode_company(data: dict[str, Any], path: str) -> Company:
    return Company(
        name=_require_string(data, "name", path),
        catchphrase=_require_string(data, "catchPhrase", path),
        bs=_require_string(data, "bs", path),
    )


def decode_user(data: Any, path: str = "user") -> User:
    """Decode one user object from its JSON representation.

    Args:
        data: Decoded JSON value of a single user.
        path: Location of the value, used in error messages.

    Returns:
        User entity. Null or absent address/company become None.

    Raises:
        DecodingError: The value does not have the expected shape.
    """
    data = _require_mapping(data, path)
    address_data = _optional_mapping(data, "address", path)
    company_data = _optional_mapping(data, "company", path)
    return User(
        name=_require_string(data, "name", path),
        username=_require_string(data, "username", path),
        email=_require_string(data, "email", path),
        address=(
            decode_address(address_data, f"{path}.address")
            if address_data is not None
            else None
        ),
        company=(
            decode_company(company_data, f"{path}.company")
            if company_data is not None
            else None
        ),
    )


def decode_users(data: Any) -> list[User]:
    """Decode a JSON array of user objects, preserving order.

    Raises:
        DecodingError: The value is not an array of user objects.
    """
    if not isinstance(data, list):
        raise DecodingError("Users response must be an array")
    return [decode_user(item, f"users[{index}]") for index, item in enumerate(data)]


class HttpUserRepository:
    """UserRepository backed by the remote users endpoint."""

    def __init__(self, client: WebServiceClient, users_path: str = "users") -> None:
        """Initialize.

        Args:
            client: Web service client configured with the base URL.
            users_path: Path of the users collection relative to the base URL.
        """
        self._client = client
        self._users_path = users_path

    def get_users(self) -> list[User]:
        """Fetch all users in the order the server returns them.

        Raises:
            TransportError: The request could not be delivered.
            ProtocolError: The server returned a non-2xx status.
            DecodingError: The response is not an array of user objects.
        """
        users = decode_users(self._client.get(self._users_path))
        logger.info("Fetched %d users", len(users))
        return users
