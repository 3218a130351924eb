"""Traffic monitor that echoes HTTP exchanges to a text stream."""

from typing import TextIO

import httpx


class TrafficMonitor:
    """Write outgoing requests and incoming responses to a stream.

    Attach it to an ``httpx.Client`` through :attr:`event_hooks`. Output is
    written synchronously and is for diagnostics only.
    """

    def __init__(self, stream: TextIO) -> None:
        """Initialize the monitor.

        Args:
            stream: Text stream to write to (for example ``sys.stdout``).
        """
        self._stream = stream

    @property
    def event_hooks(self) -> dict[str, list]:
        """Event hooks in the form accepted by ``httpx.Client``."""
        return {"request": [self.on_request], "response": [self.on_response]}

    def on_request(self, request: httpx.Request) -> None:
        """Write the request line, headers and body."""
        self._stream.write(f"{request.method} {request.url}\n")
        self._write_headers(request.headers)
        self._write_body(request.content)

    def on_response(self, response: httpx.Response) -> None:
        """Write the status line, headers and body of a response."""
        # Hooks run before the body is consumed.
        response.read()
        self._stream.write(f"HTTP {response.status_code}\n")
        self._write_headers(response.headers)
        self._write_body(response.content)

    def _write_headers(self, headers: httpx.Headers) -> None:
        for key, value in headers.items():
            self._stream.write(f"{key}: {value}\n")
        self._stream.write("\n")

    def _write_body(self, content: bytes) -> None:
        if content:
            self._stream.write(content.decode("utf-8", errors="replace"))
            self._stream.write("\n\n")
        self._stream.flush()
