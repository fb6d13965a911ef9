"""Zabbix API client facade."""

from __future__ import annotations

from typing import Any

from zabbix_api.config import Settings
from zabbix_api.protocol.jsonrpc import JsonRpcClient
from zabbix_api.protocol.models import Params
from zabbix_api.services.action import ActionService
from zabbix_api.services.host_group import HostGroupService
from zabbix_api.services.session import SessionService
from zabbix_api.services.user import UserService
from zabbix_api.transport.http import HttpTransport


class ZabbixAPI:
    """Client for one Zabbix API endpoint.

    Wires a single transport and JSON-RPC client into the session service
    and one service per object type, so all of them share the correlation
    id counter and the auth token.

    Args:
        url: Full endpoint URL (e.g., "http://zabbix.local/api_jsonrpc.php")
        timeout: Request timeout in seconds (default: None)
        verify_ssl: Whether to verify SSL certificates (default: True)
        transport: Prebuilt transport; overrides the three arguments above
        client: Prebuilt JSON-RPC client; overrides all arguments above

    Example:
        >>> with ZabbixAPI("http://zabbix.local/api_jsonrpc.php") as api:
        ...     api.login("Admin", "zabbix")
        ...     action = api.actions.get_by_id("7")
    """

    def __init__(
        self,
        url: str = "",
        timeout: float | None = None,
        verify_ssl: bool = True,
        transport: HttpTransport | None = None,
        client: JsonRpcClient | None = None,
    ) -> None:
        if client is None:
            client = JsonRpcClient(
                transport
                or HttpTransport(url, timeout=timeout, verify_ssl=verify_ssl)
            )
        self.client = client
        self.transport = client.transport
        self.session = SessionService(self.client)
        self.actions = ActionService(self.client)
        self.users = UserService(self.client)
        self.host_groups = HostGroupService(self.client)

    @classmethod
    def from_settings(cls, settings: Settings, client: JsonRpcClient | None = None) -> ZabbixAPI:
        """Build a client from settings, logging in when credentials are set.

        A prebuilt ``client`` is used instead of one built from the
        connection settings.
        """
        api = cls(
            settings.url,
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
            client=client,
        )
        if settings.has_credentials:
            api.login(settings.user, settings.password.get_secret_value())  # type: ignore[arg-type, union-attr]
        return api

    @property
    def auth(self) -> str | None:
        """Current session token."""
        return self.client.auth_token

    def login(self, user: str, password: str) -> str:
        return self.session.login(user, password)

    def logout(self) -> bool:
        return self.session.logout()

    def version(self) -> str:
        return self.session.version()

    def call(self, method: str, params: Params | None = None) -> Any:
        """Call any API method and return its raw result."""
        return self.client.call(method, params)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> ZabbixAPI:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
