"""Zabbix API client - typed bindings for the Zabbix JSON-RPC API.

Usage:
    from zabbix_api import ZabbixAPI, Action, Filter, Condition

    api = ZabbixAPI("http://zabbix.local/api_jsonrpc.php")
    api.login("Admin", "zabbix")

    actions = [Action(name="autoregister", event_source="2", filter=Filter(eval_type="0"))]
    api.actions.create(actions)      # actions[0].action_id is now set
    api.actions.get_by_id(actions[0].action_id)
    api.actions.delete(actions)      # actions[0].action_id is None again

Layers (each only talks to the one below it):
    services   -- typed create/get/update/delete per object type, login
    protocol   -- JSON-RPC 2.0 envelopes, auth token, error unpacking
    transport  -- HTTP POST via requests
"""

__version__ = "0.1.0"

from zabbix_api.exceptions import ZabbixAPIError
from zabbix_api.transport.exceptions import (
    TransportError,
    NetworkError,
    TimeoutError,
    HttpError,
    MalformedResponseError,
    ResponseIdMismatchError,
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
from zabbix_api.services.exceptions import (
    ContractError,
    ExpectedOneResultError,
    ExpectedMoreError,
)
from zabbix_api.models import (
    ZabbixObject,
    Action,
    Filter,
    Condition,
    Operation,
    OperationGroup,
    OperationTemplate,
    User,
    UserGroupRef,
    HostGroup,
)
from zabbix_api.config import Settings
from zabbix_api.client import ZabbixAPI

__all__ = [
    "ZabbixAPI",
    "Settings",
    # Records
    "ZabbixObject",
    "Action",
    "Filter",
    "Condition",
    "Operation",
    "OperationGroup",
    "OperationTemplate",
    "User",
    "UserGroupRef",
    "HostGroup",
    # Exceptions
    "ZabbixAPIError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "HttpError",
    "MalformedResponseError",
    "ResponseIdMismatchError",
    "ProtocolError",
    "RemoteError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    "ApplicationError",
    "DecodeError",
    "ContractError",
    "ExpectedOneResultError",
    "ExpectedMoreError",
]
