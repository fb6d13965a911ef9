"""JSON-RPC 2.0 protocol models.

This module defines Pydantic models for the request and response envelopes
exchanged with the Zabbix API.

References:
    JSON-RPC 2.0 Specification: https://www.jsonrpc.org/specification
    Zabbix API: https://www.zabbix.com/documentation/current/en/manual/api
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Parameters are either a named mapping or a positional list (e.g. the
# records passed to <object>.create, or the ids passed to <object>.delete).
Params = Union[dict[str, Any], list[Any]]


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Error code (integer)
        message: Short error message
        data: Longer error description

    Example:
        >>> error = JsonRpcError(code=-32602, message="Invalid params.", data="No permissions.")
        >>> error.code
        -32602
    """

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    data: Any = Field(default=None, description="Error details")


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object.

    Attributes:
        jsonrpc: Protocol version (always "2.0")
        method: Method name to invoke (e.g., "action.create")
        params: Method parameters, a mapping or a list
        auth: Session token; left out of the wire body when empty
        id: Correlation id

    Example:
        >>> request = JsonRpcRequest(method="apiinfo.version", id=1)
        >>> request.to_wire()
        b'{"jsonrpc":"2.0","method":"apiinfo.version","params":{},"id":1}'
    """

    jsonrpc: Literal["2.0"] = Field(default="2.0", description="JSON-RPC version")
    method: str = Field(..., description="Method name to invoke")
    params: Params = Field(default_factory=dict, description="Method parameters")
    auth: str | None = Field(default=None, description="Authentication token")
    id: int = Field(..., description="Request ID")

    def to_wire(self) -> bytes:
        """Encode the request as a UTF-8 JSON body."""
        exclude = None if self.auth else {"auth"}
        return self.model_dump_json(exclude=exclude).encode("utf-8")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object.

    Attributes:
        jsonrpc: Protocol version
        result: Method result, shape depends on the method
        error: Error object (present on failure)
        id: Correlation id echoed from the request (None on parse errors)
    """

    jsonrpc: str = Field(default="2.0", description="JSON-RPC version")
    result: Any = Field(default=None, description="Method result")
    error: JsonRpcError | None = Field(default=None, description="Error object")
    id: int | str | None = Field(default=None, description="Request ID")

    model_config = ConfigDict(extra="ignore")
