"""Protocol layer exceptions.

``RemoteError`` and its subclasses mean the server understood the request
and explicitly rejected it. ``DecodeError`` means the call succeeded but its
result did not have the shape the caller asked for.
"""

from __future__ import annotations

from typing import Any

from zabbix_api.exceptions import ZabbixAPIError


class ProtocolError(ZabbixAPIError):
    """Base exception for protocol layer errors."""

    pass


class RemoteError(ProtocolError):
    """Error object returned by the Zabbix API.

    The attributes are read-only once the error is constructed.

    Args:
        code: JSON-RPC error code
        message: Short error message
        data: Longer error description

    Example:
        >>> str(RemoteError(-32602, "Invalid params.", "No permissions."))
        '-32602 (Invalid params.): No permissions.'
    """

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(code, message, data)
        self._code = code
        self._message = message
        self._data = data

    @property
    def code(self) -> int:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def data(self) -> Any:
        return self._data

    def __str__(self) -> str:
        data = "" if self._data is None else self._data
        return f"{self._code} ({self._message}): {data}"


class ParseError(RemoteError):
    """Server could not parse the request JSON (-32700)."""

    CODE = -32700


class InvalidRequestError(RemoteError):
    """Request is not a valid JSON-RPC request (-32600)."""

    CODE = -32600


class MethodNotFoundError(RemoteError):
    """Requested method does not exist (-32601)."""

    CODE = -32601


class InvalidParamsError(RemoteError):
    """Parameters were rejected (-32602).

    Zabbix also reports permission problems and unknown object ids with
    this code.
    """

    CODE = -32602


class InternalError(RemoteError):
    """Server internal error (-32603)."""

    CODE = -32603


class ApplicationError(RemoteError):
    """Zabbix application-level error (-32500)."""

    CODE = -32500


class DecodeError(ProtocolError):
    """Result payload does not match the expected shape.

    Args:
        method: Method whose result failed to decode
        expected: Description of the expected result type
        cause: Original validation error (optional)
    """

    def __init__(
        self,
        method: str,
        expected: Any,
        cause: Exception | None = None,
    ) -> None:
        message = f"Cannot decode result of {method} as {expected}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
        self.method = method
        self.expected = expected
        self.cause = cause


_ERRORS_BY_CODE: dict[int, type[RemoteError]] = {
    cls.CODE: cls
    for cls in (
        ParseError,
        InvalidRequestError,
        MethodNotFoundError,
        InvalidParamsError,
        InternalError,
        ApplicationError,
    )
}


def remote_error_for(code: int, message: str, data: Any = None) -> RemoteError:
    """Build the most specific ``RemoteError`` for a JSON-RPC error code."""
    return _ERRORS_BY_CODE.get(code, RemoteError)(code, message, data)
