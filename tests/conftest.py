"""Shared fixtures for Zabbix API client tests."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import Mock

import pytest

from zabbix_api.container import reset_container
from zabbix_api.protocol.jsonrpc import JsonRpcClient
from zabbix_api.transport.http import HttpTransport


def _sent_request(transport: Mock, index: int = -1) -> dict[str, Any]:
    call = transport.post.call_args_list[index]
    return json.loads(call.args[0])


def _reply(result: Any = None, error: dict[str, Any] | None = None) -> Callable[..., dict[str, Any]]:
    def respond(payload: bytes, headers: dict[str, str] | None = None) -> dict[str, Any]:
        body: dict[str, Any] = {"jsonrpc": "2.0", "id": json.loads(payload)["id"]}
        if error is not None:
            body["error"] = error
        else:
            body["result"] = result
        return body

    return respond


@pytest.fixture
def sent_request() -> Callable[..., dict[str, Any]]:
    """Decode the JSON-RPC request body passed to a mocked transport."""
    return _sent_request


@pytest.fixture
def reply() -> Callable[..., Callable[..., dict[str, Any]]]:
    """Build a transport side effect that echoes the request id."""
    return _reply


@pytest.fixture
def transport() -> Mock:
    return Mock(spec=HttpTransport)


@pytest.fixture
def client(transport: Mock) -> JsonRpcClient:
    return JsonRpcClient(transport)


@pytest.fixture(autouse=True)
def _reset_container():
    yield
    reset_container()
