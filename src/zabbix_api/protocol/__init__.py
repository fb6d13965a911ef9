"""Protocol layer for the Zabbix API client.

This module handles JSON-RPC 2.0 with no knowledge of Zabbix objects. It is
responsible for:
- Request envelope construction and correlation ids
- The ``auth`` token field
- Response validation and error unpacking
- Decoding result payloads into typed values
"""

from zabbix_api.protocol.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Params,
)
from zabbix_api.protocol.exceptions import (
    ProtocolError,
    RemoteError,
    ParseError,
    InvalidRequestError,
    MethodNotFoundError,
    InvalidParamsError,
    InternalError,
    ApplicationError,
    DecodeError,
)
from zabbix_api.protocol.jsonrpc import JsonRpcClient

__all__ = [
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Params",
    # Exceptions
    "ProtocolError",
    "RemoteError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "ApplicationError",
    "DecodeError",
    # Client
    "JsonRpcClient",
]
