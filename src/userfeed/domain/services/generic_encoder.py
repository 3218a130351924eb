"""Conversion of user records to generic JSON-compatible values."""

import json
from typing import Any

from userfeed.domain.entities.user import Address, Company, Geolocation, User


def geolocation_to_generic(geolocation: Geolocation | None) -> dict[str, Any] | None:
    if geolocation is None:
        return None
    return {"lat": geolocation.latitude, "lng": geolocation.longitude}


def address_to_generic(address: Address | None) -> dict[str, Any] | None:
    if address is None:
        return None
    return {
        "street": address.street,
        "suite": address.suite,
        "city": address.city,
        "zipcode": address.zip_code,
        "geo": geolocation_to_generic(address.geolocation),
    }


def company_to_generic(company: Company | None) -> dict[str, Any] | None:
    if company is None:
        return None
    return {
        "name": company.name,
        "catchPhrase": company.catchphrase,
        "bs": company.bs,
    }


def to_generic(users: list[User]) -> list[dict[str, Any]]:
    """Convert users to nested dicts and lists of primitives.

    Keys follow the remote API's field names. Absent optional records are
    kept as explicit ``None`` so they are distinguishable from missing keys.

    Args:
        users: Users to convert.

    Returns:
        A list with one dict per user, in the same order.
    """
    return [
        {
            "name": user.name,
            "username": user.username,
            "email": user.email,
            "address": address_to_generic(user.address),
            "company": company_to_generic(user.company),
        }
        for user in users
    ]


def encode_users(users: list[User], indent: int = 2) -> str:
    """Serialize users as an indented JSON document."""
    return json.dumps(
        to_generic(users), indent=indent, ensure_ascii=False, allow_nan=False
    )
