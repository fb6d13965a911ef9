"""Transport layer exceptions.

These exceptions are raised by the transport layer when network-level
errors occur, or when the server reply cannot be read as a JSON-RPC
envelope at all. They say nothing about whether the server accepted the
call.
"""

from __future__ import annotations

from zabbix_api.exceptions import ZabbixAPIError


class TransportError(ZabbixAPIError):
    """Base exception for transport layer errors.

    Raised when network-level communication fails. This is the base class
    for all transport-specific errors.

    Args:
        message: Human-readable error description
        status_code: HTTP status code if applicable
        cause: Original exception that caused this error

    Attributes:
        message: Error message
        status_code: HTTP status code (or None)
        cause: Original exception (or None)
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (status: {self.status_code})"
        return self.message


class NetworkError(TransportError):
    """Network-level error occurred.

    Examples:
        - Connection refused
        - DNS lookup failed
        - Network unreachable
    """

    pass


class TimeoutError(TransportError):
    """Request timed out.

    Only raised when a timeout was configured on the transport; by default
    the underlying HTTP client waits indefinitely.
    """

    pass


class HttpError(TransportError):
    """HTTP error response received (status code 4xx or 5xx)."""

    pass


class MalformedResponseError(TransportError):
    """The response body is not a valid JSON-RPC envelope.

    Raised when the body is not JSON, is not a JSON object, or does not
    validate as a JSON-RPC 2.0 response.
    """

    pass


class ResponseIdMismatchError(MalformedResponseError):
    """The response id does not echo the request id.

    Args:
        expected: Request id that was sent
        got: Response id that came back
    """

    def __init__(self, expected: int, got: int | str) -> None:
        super().__init__(f"Response id mismatch: sent {expected}, got {got!r}")
        self.expected = expected
        self.got = got
