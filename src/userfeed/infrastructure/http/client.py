"""Synchronous web service client built on httpx."""

import locale
import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

import httpx

from userfeed.infrastructure.http.exceptions import (
    DecodingError,
    ProtocolError,
    TransportError,
)
from userfeed.infrastructure.http.monitor import TrafficMonitor

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 15.0
DEFAULT_READ_TIMEOUT = 60.0


def accept_language() -> str | None:
    """Build an Accept-Language value from the process locale.

    Returns:
        A value like "en-us", or None if the locale is not set.
    """
    try:
        language_code = locale.getlocale()[0]
    except ValueError:
        return None
    if not language_code or language_code in ("C", "POSIX"):
        return None
    return language_code.replace("_", "-").lower()


def _parameter_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    return value


def encode_arguments(arguments: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    """Flatten query arguments into key/value pairs.

    ``None`` values are skipped, lists and tuples repeat the key, and
    datetimes are sent as epoch milliseconds.
    """
    if not arguments:
        return []

    params: list[tuple[str, Any]] = []
    for key, argument in arguments.items():
        if not key:
            raise ValueError("Argument name must not be empty")
        values = argument if isinstance(argument, (list, tuple)) else [argument]
        for value in values:
            if value is None:
                continue
            params.append((key, _parameter_value(value)))
    return params


class RequestEncoding(Enum):
    """Encoding of the request body."""

    JSON = "application/json"
    APPLICATION_X_WWW_FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART_FORM_DATA = "multipart/form-data"


ErrorHandler = Callable[[httpx.Response], None]


def default_error_handler(response: httpx.Response) -> None:
    """Raise ProtocolError for a non-2xx response.

    The message is the response text for ``text/plain`` bodies, otherwise
    "HTTP <status>".

    Raises:
        ProtocolError: Always.
    """
    status_code = response.status_code
    content_type = response.headers.get("content-type", "")
    if content_type.lower().startswith("text/plain") and response.text:
        message = response.text
    else:
        message = f"HTTP {status_code}"
    logger.warning("Request returned error status: %s", message)
    raise ProtocolError(message, status_code)


def encode_form(arguments: Mapping[str, Any] | None) -> dict[str, list[Any]]:
    """Group arguments by name for an url-encoded form body."""
    form: dict[str, list[Any]] = {}
    for key, value in encode_arguments(arguments):
        form.setdefault(key, []).append(value)
    return form


def encode_multipart(arguments: Mapping[str, Any] | None) -> list[tuple[str, Any]]:
    """Build multipart form fields from arguments.

    ``Path`` values are uploaded as files; other values are sent as plain
    form fields.
    """
    fields: list[tuple[str, Any]] = []
    for key, value in encode_arguments(arguments):
        if isinstance(value, Path):
            fields.append(
                (key, (value.name, value.read_bytes(), "application/octet-stream"))
            )
        else:
            fields.append((key, (None, str(value).encode("utf-8"))))
    return fields


class WebServiceClient:
    """Blocking client for a JSON web service.

    Each call performs exactly one request; there are no retries. Redirects
    are followed.
    """

    def __init__(
        self,
        base_url: str,
        headers: Mapping[str, str] | None = None,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        read_timeout: float = DEFAULT_READ_TIMEOUT,
        monitor: TrafficMonitor | None = None,
        error_handler: ErrorHandler = default_error_handler,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL that request paths are resolved against.
            headers: Custom headers sent with every request.
            connect_timeout: Connect timeout in seconds.
            read_timeout: Read timeout in seconds.
            monitor: Optional traffic monitor.
            error_handler: Called with every non-2xx response. It is expected
                to raise; if it returns, the request returns None.
            transport: Optional httpx transport (used in tests).
        """
        default_headers: dict[str, str] = {}
        language = accept_language()
        if language is not None:
            default_headers["Accept-Language"] = language
        default_headers.update(headers or {})

        self._error_handler = error_handler
        self._client = httpx.Client(
            base_url=base_url,
            headers=default_headers,
            timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
            follow_redirects=True,
            event_hooks=monitor.event_hooks if monitor is not None else None,
            transport=transport,
        )

    def __enter__(self) -> "WebServiceClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._client.close()

    def get(self, path: str, arguments: Mapping[str, Any] | None = None) -> Any:
        """Perform a GET request.

        See :meth:`request`.
        """
        return self.request("GET", path, arguments=arguments)

    def request(
        self,
        method: str,
        path: str,
        arguments: Mapping[str, Any] | None = None,
        body: Any = None,
        encoding: RequestEncoding = RequestEncoding.JSON,
    ) -> Any:
        """Perform one request and decode the JSON response.

        With a form encoding, ``arguments`` are sent as the request body
        instead of the query string and ``body`` must be None.

        Args:
            method: HTTP method.
            path: Path relative to the base URL.
            arguments: Query or form arguments.
            body: Value sent as the JSON request body, if not None.
            encoding: Encoding of the request body.

        Returns:
            The decoded response body, or None for 204/205-style responses.

        Raises:
            ValueError: A body was given together with a form encoding.
            TransportError: The request could not be delivered.
            ProtocolError: The server returned a non-2xx status.
            DecodingError: The response body is not valid JSON.
        """
        method = method.upper()
        logger.debug("%s %s", method, path)

        content: dict[str, Any]
        if encoding is RequestEncoding.JSON:
            content = {"params": encode_arguments(arguments), "json": body}
        elif body is not None:
            raise ValueError(f"{encoding.value} requests take no body")
        elif encoding is RequestEncoding.APPLICATION_X_WWW_FORM_URLENCODED:
            content = {"data": encode_form(arguments)}
        else:
            content = {"files": encode_multipart(arguments)}

        try:
            response = self._client.request(method, path, **content)
        except httpx.RequestError as e:
            logger.warning("Request failed: %s %s - %s", method, path, e)
            raise TransportError(f"{method} {path} failed: {e}") from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        status_code = response.status_code

        if status_code // 100 != 2:
            self._error_handler(response)
            return None

        if status_code % 100 >= 4:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodingError(f"Invalid JSON response: {e}") from e
