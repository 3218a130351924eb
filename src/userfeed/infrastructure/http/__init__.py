"""HTTP integration."""

from userfeed.infrastructure.http.client import (
    RequestEncoding,
    WebServiceClient,
    default_error_handler,
)
from userfeed.infrastructure.http.exceptions import (
    DecodingError,
    ProtocolError,
    TransportError,
    WebServiceError,
)
from userfeed.infrastructure.http.monitor import TrafficMonitor
from userfeed.infrastructure.http.user_repository import (
    HttpUserRepository,
    decode_user,
    decode_users,
)

__all__ = [
    "DecodingError",
    "HttpUserRepository",
    "ProtocolError",
    "RequestEncoding",
    "TrafficMonitor",
    "TransportError",
    "WebServiceClient",
    "WebServiceError",
    "decode_user",
    "decode_users",
    "default_error_handler",
]
