"""Console formatting for user records."""

from userfeed.domain.entities.user import Address, Company, User


def format_address(address: Address) -> list[str]:
    """Format an address and, if present, its geolocation.

    Args:
        address: The address to format.

    Returns:
        Lines like "Kulas Light, Apt. 556, Gwenborough 92998-3874",
        followed by "-37.3159, 81.1496" when the geolocation is known.
    """
    lines = [
        f"{address.street}, {address.suite}, {address.city} {address.zip_code}"
    ]

    geolocation = address.geolocation
    if geolocation is not None:
        lines.append(f"{geolocation.latitude}, {geolocation.longitude}")

    return lines


def format_company(company: Company) -> list[str]:
    """Format a company as its name with catchphrase, then its slogan."""
    return [f'{company.name} ("{company.catchphrase}")', company.bs]


def format_user(user: User) -> list[str]:
    """Format one user as display lines, without the trailing blank line.

    Absent address or company produce no lines.
    """
    lines = [f"{user.name} ({user.username})", user.email]

    if user.address is not None:
        lines.extend(format_address(user.address))

    if user.company is not None:
        lines.extend(format_company(user.company))

    return lines


def format_users(users: list[User]) -> str:
    """Format users in order, each block followed by a blank line.

    Args:
        users: Users in the order received.

    Returns:
        The formatted text, or an empty string if there are no users.
    """
    return "".join("\n".join(format_user(user)) + "\n\n" for user in users)
