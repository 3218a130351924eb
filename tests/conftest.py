"""Common fixtures for user tests."""

from typing import Any

import pytest

from userfeed.domain.entities import Address, Company, Geolocation, User


@pytest.fixture
def leanne_json() -> dict[str, Any]:
    """Create a full user object as the remote API returns it."""
    return {
        "id": 1,
        "name": "Leanne Graham",
        "username": "Bret",
        "email": "Sincere@april.biz",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }


@pytest.fixture
def leanne() -> User:
    """Create the user entity matching leanne_json."""
    return User(
        name="Leanne Graham",
        username="Bret",
        email="Sincere@april.biz",
        address=Address(
            street="Kulas Light",
            suite="Apt. 556",
            city="Gwenborough",
            zip_code="92998-3874",
            geolocation=Geolocation(latitude=-37.3159, longitude=81.1496),
        ),
        company=Company(
            name="Romaguera-Crona",
            catchphrase="Multi-layered client-server neural-net",
            bs="harness real-time e-markets",
        ),
    )


@pytest.fixture
def minimal_user() -> User:
    """Create a user without address and company."""
    return User(name="A", username="a", email="a@x.com")
