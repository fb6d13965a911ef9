"""JSON-RPC 2.0 client implementation.

This module builds request envelopes for the Zabbix API, unpacks response
envelopes and decodes result payloads into typed Python values.
"""

from __future__ import annotations

from functools import lru_cache
import threading
from typing import Any, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from zabbix_api.protocol.exceptions import DecodeError, remote_error_for
from zabbix_api.protocol.models import JsonRpcRequest, JsonRpcResponse, Params
from zabbix_api.transport.exceptions import (
    MalformedResponseError,
    ResponseIdMismatchError,
)
from zabbix_api.transport.http import HttpTransport

logger = structlog.get_logger()

T = TypeVar("T")


@lru_cache(maxsize=128)
def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class JsonRpcClient:
    """JSON-RPC 2.0 client for the Zabbix API.

    The client owns the correlation id counter and the current auth token.
    One instance may be shared between threads: ids are handed out under a
    lock and each call reads whatever token is current when it starts.

    Args:
        transport: HTTP transport instance
        auth_token: Optional session token from a previous login

    Attributes:
        transport: HTTP transport for network communication
        auth_token: Token sent in the ``auth`` field of each request
        request_id: Last correlation id handed out

    Example:
        >>> client = JsonRpcClient(HttpTransport("http://zabbix.local/api_jsonrpc.php"))
        >>> client.call("apiinfo.version", authenticate=False)
        '6.0.0'
    """

    def __init__(
        self,
        transport: HttpTransport,
        auth_token: str | None = None,
    ) -> None:
        self.transport = transport
        self.auth_token = auth_token
        self.request_id = 0
        self._id_lock = threading.Lock()

    def _next_id(self) -> int:
        """Return the next correlation id.

        Ids start at 1 and strictly increase for the lifetime of the client,
        even when several threads call at once.
        """
        with self._id_lock:
            self.request_id += 1
            return self.request_id

    def call(
        self,
        method: str,
        params: Params | None = None,
        authenticate: bool = True,
    ) -> Any:
        """Execute a JSON-RPC method call and return its raw result.

        Args:
            method: Method name to invoke (e.g., "action.get")
            params: Method parameters, a mapping or a list (default: {})
            authenticate: Send the current auth token (default: True)

        Returns:
            The ``result`` member of the response; its shape depends on the method

        Raises:
            TransportError: Request failed or the reply is not a valid envelope
            RemoteError: Server returned an error object

        Example:
            >>> client.call("action.delete", ["17"])
            {'actionids': ['17']}
        """
        auth = self.auth_token if authenticate else None
        request = JsonRpcRequest(
            method=method,
            params={} if params is None else params,
            auth=auth or None,
            id=self._next_id(),
        )

        logger.debug("JSON-RPC request", method=method, request_id=request.id)
        body = self.transport.post(request.to_wire())

        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Expected JSON object response to {method}, got {type(body).__name__}"
            )

        try:
            response = JsonRpcResponse.model_validate(body)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response validation failed: {str(e)}", cause=e
            ) from e

        # Zabbix answers requests it could not parse with a null id.
        if response.id is not None and response.id != request.id:
            raise ResponseIdMismatchError(request.id, response.id)

        if response.error is not None:
            error = remote_error_for(
                response.error.code, response.error.message, response.error.data
            )
            logger.warning(
                "JSON-RPC error",
                method=method,
                request_id=request.id,
                code=error.code,
                error=error.message,
            )
            raise error

        logger.debug("JSON-RPC response", method=method, request_id=request.id)
        return response.result

    def call_typed(
        self,
        method: str,
        params: Params | None,
        result_type: type[T] | Any,
        authenticate: bool = True,
    ) -> T:
        """Execute a call and decode its result into ``result_type``.

        ``result_type`` is anything pydantic can validate against: a model,
        ``list[Model]``, ``str``, ``dict[str, list[str]]`` and so on.

        Raises:
            TransportError: Request failed or the reply is not a valid envelope
            RemoteError: Server returned an error object
            DecodeError: Result does not match ``result_type``

        Example:
            >>> client.call_typed("user.get", {"output": "extend"}, list[User])
            [User(user_id='1', username='Admin', ...)]
        """
        result = self.call(method, params, authenticate=authenticate)
        try:
            return _type_adapter(result_type).validate_python(result)
        except ValidationError as e:
            raise DecodeError(method, result_type, cause=e) from e
