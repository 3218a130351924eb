"""Web service exceptions."""


class WebServiceError(Exception):
    """Base exception for web service errors."""


class TransportError(WebServiceError):
    """The request could not be delivered (DNS, connect, timeout)."""


class ProtocolError(WebServiceError):
    """The server answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize.

        Args:
            message: Error message from the server, or "HTTP <status>".
            status_code: HTTP status code of the response.
        """
        self.status_code = status_code
        super().__init__(message)


class DecodingError(WebServiceError):
    """The response body is malformed or does not match the expected shape."""
