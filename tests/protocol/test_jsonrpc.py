"""Unit tests for JSON-RPC client.

These tests verify the JsonRpcClient builds correct request envelopes,
unpacks response envelopes and keeps the three error families apart.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from zabbix_api.models import User
from zabbix_api.protocol.jsonrpc import JsonRpcClient
from zabbix_api.protocol.exceptions import (
    ApplicationError,
    DecodeError,
    InvalidParamsError,
    MethodNotFoundError,
    RemoteError,
)
from zabbix_api.transport.exceptions import (
    MalformedResponseError,
    NetworkError,
    ResponseIdMismatchError,
    TransportError,
)


class TestJsonRpcClientInit:
    """Tests for JsonRpcClient initialization."""

    def test_init_with_transport(self, transport: Mock) -> None:
        client = JsonRpcClient(transport)

        assert client.transport is transport
        assert client.auth_token is None
        assert client.request_id == 0

    def test_init_with_auth_token(self, transport: Mock) -> None:
        client = JsonRpcClient(transport, auth_token="token-123")

        assert client.auth_token == "token-123"


class TestJsonRpcClientRequestIds:
    """Tests for correlation id handling."""

    def test_ids_start_at_one_and_increment(self, client, transport, reply, sent_request) -> None:
        transport.post.side_effect = reply("6.0.0")

        client.call("apiinfo.version")
        client.call("apiinfo.version")
        client.call("apiinfo.version")

        assert [sent_request(transport, i)["id"] for i in range(3)] == [1, 2, 3]

    def test_ids_unique_across_threads(self, client: JsonRpcClient) -> None:
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: client._next_id(), range(500)))

        assert sorted(ids) == list(range(1, 501))
        assert client.request_id == 500

    def test_ids_not_shared_between_clients(self, transport: Mock) -> None:
        first = JsonRpcClient(transport)
        second = JsonRpcClient(transport)

        first._next_id()
        first._next_id()

        assert second._next_id() == 1


class TestJsonRpcClientCall:
    """Tests for JsonRpcClient.call() method."""

    def test_call_success(self, client, transport, reply) -> None:
        transport.post.side_effect = reply({"actionids": ["3"]})

        result = client.call("action.delete", ["3"])

        assert result == {"actionids": ["3"]}
        transport.post.assert_called_once()

    def test_call_builds_envelope(self, client, transport, reply, sent_request) -> None:
        transport.post.side_effect = reply([])

        client.call("action.get", {"output": "extend"})

        request = sent_request(transport)
        assert request == {
            "jsonrpc": "2.0",
            "method": "action.get",
            "params": {"output": "extend"},
            "id": 1,
        }

    def test_call_with_empty_params(self, client, transport, reply, sent_request) -> None:
        transport.post.side_effect = reply("6.0.0")

        client.call("apiinfo.version")

        assert sent_request(transport)["params"] == {}

    def test_call_sends_current_auth_token(self, client, transport, reply, sent_request) -> None:
        transport.post.side_effect = reply([])

        client.auth_token = "first"
        client.call("user.get")
        client.auth_token = "second"
        client.call("user.get")

        assert sent_request(transport, 0)["auth"] == "first"
        assert sent_request(transport, 1)["auth"] == "second"

    def test_call_without_authentication(self, transport, reply, sent_request) -> None:
        transport.post.side_effect = reply("6.0.0")
        client = JsonRpcClient(transport, auth_token="token-123")

        client.call("apiinfo.version", authenticate=False)

        assert "auth" not in sent_request(transport)

    def test_call_accepts_null_response_id(self, client, transport) -> None:
        transport.post.return_value = {"jsonrpc": "2.0", "result": True, "id": None}

        assert client.call("user.logout", []) is True

    def test_call_raises_on_id_mismatch(self, client, transport) -> None:
        transport.post.return_value = {"jsonrpc": "2.0", "result": "6.0.0", "id": 99}

        with pytest.raises(ResponseIdMismatchError) as exc_info:
            client.call("apiinfo.version")

        assert exc_info.value.expected == 1
        assert exc_info.value.got == 99
        assert isinstance(exc_info.value, TransportError)

    def test_call_raises_on_non_object_body(self, client, transport) -> None:
        transport.post.return_value = [{"jsonrpc": "2.0", "result": "6.0.0", "id": 1}]

        with pytest.raises(MalformedResponseError):
            client.call("apiinfo.version")

    def test_call_raises_on_invalid_envelope(self, client, transport) -> None:
        transport.post.return_value = {"jsonrpc": "2.0", "error": "broken", "id": 1}

        with pytest.raises(MalformedResponseError):
            client.call("apiinfo.version")

    def test_transport_errors_propagate(self, client, transport) -> None:
        transport.post.side_effect = NetworkError("Connection failed: refused")

        with pytest.raises(NetworkError):
            client.call("apiinfo.version")


class TestJsonRpcClientErrors:
    """Tests for remote error unpacking."""

    def test_remote_error_fields_and_format(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(
            error={
                "code": -32602,
                "message": "Invalid params.",
                "data": "No permissions to referred object or it does not exist!",
            }
        )

        with pytest.raises(InvalidParamsError) as exc_info:
            client.call("action.get", {"actionids": "999"})

        error = exc_info.value
        assert error.code == -32602
        assert error.message == "Invalid params."
        assert str(error) == (
            "-32602 (Invalid params.): No permissions to referred object or it does not exist!"
        )

    def test_remote_error_is_not_transport_error(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(
            error={"code": -32500, "message": "Application error.", "data": "Login name or password is incorrect."}
        )

        with pytest.raises(RemoteError) as exc_info:
            client.call("user.authenticate", {"user": "Admin", "password": "wrong"})

        assert isinstance(exc_info.value, ApplicationError)
        assert not isinstance(exc_info.value, TransportError)

    def test_method_not_found(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(
            error={"code": -32601, "message": "Method not found.", "data": "Incorrect API \"foo\"."}
        )

        with pytest.raises(MethodNotFoundError):
            client.call("foo.get")

    def test_unknown_code_is_plain_remote_error(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(error={"code": -1, "message": "Odd", "data": "x"})

        with pytest.raises(RemoteError) as exc_info:
            client.call("foo.get")

        assert type(exc_info.value) is RemoteError

    def test_remote_error_is_read_only(self) -> None:
        error = RemoteError(-32602, "Invalid params.", "details")

        with pytest.raises(AttributeError):
            error.code = 0  # type: ignore[misc]


class TestJsonRpcClientCallTyped:
    """Tests for JsonRpcClient.call_typed() method."""

    def test_decodes_scalar(self, client, transport, reply) -> None:
        transport.post.side_effect = reply("6.0.21")

        assert client.call_typed("apiinfo.version", {}, str) == "6.0.21"

    def test_decodes_records(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(
            [{"userid": "1", "username": "Admin", "name": "Zabbix", "autologin": "1"}]
        )

        users = client.call_typed("user.get", {"output": "extend"}, list[User])

        assert users == [User(user_id="1", username="Admin", name="Zabbix")]

    def test_shape_mismatch_raises_decode_error(self, client, transport, reply) -> None:
        transport.post.side_effect = reply({"userids": ["1"]})

        with pytest.raises(DecodeError) as exc_info:
            client.call_typed("user.get", {}, list[User])

        assert exc_info.value.method == "user.get"
        assert not isinstance(exc_info.value, RemoteError)
        assert not isinstance(exc_info.value, TransportError)

    def test_remote_error_not_reported_as_decode_error(self, client, transport, reply) -> None:
        transport.post.side_effect = reply(
            error={"code": -32602, "message": "Invalid params.", "data": "Session terminated."}
        )

        with pytest.raises(InvalidParamsError):
            client.call_typed("user.get", {}, list[User])
