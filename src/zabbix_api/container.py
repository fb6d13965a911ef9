"""Dependency injection container for the Zabbix API client.

Factory functions build the client stack from ``Settings`` once per process
and cache it:
- get_settings(): Load and cache settings
- get_transport(): Create and cache HTTP transport
- get_jsonrpc_client(): Create and cache JSON-RPC client
- get_api(): Create and cache a ZabbixAPI facade (logged in when credentials are set)

Tests swap any of them with set_override() and undo it with reset_container().
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from zabbix_api.client import ZabbixAPI
from zabbix_api.config import Settings
from zabbix_api.protocol.jsonrpc import JsonRpcClient
from zabbix_api.transport.http import HttpTransport

# Global container state for testing/mocking
_overrides: dict[str, Any] = {}


def set_override(key: str, value: Any) -> None:
    """Override a container dependency for testing.

    Args:
        key: Dependency key ("settings", "transport", "client" or "api")
        value: Mock or test implementation

    Example:
        >>> set_override("transport", Mock(spec=HttpTransport))
        >>> transport = get_transport()  # Returns mock
        >>> reset_container()
    """
    _overrides[key] = value


def clear_overrides() -> None:
    """Clear all dependency overrides."""
    _overrides.clear()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings from the environment."""
    if "settings" in _overrides:
        override = _overrides["settings"]
        if not isinstance(override, Settings):
            raise TypeError("Override for 'settings' must be a Settings instance")
        return override

    return Settings()


@lru_cache(maxsize=1)
def get_transport() -> HttpTransport:
    """Create and cache HTTP transport."""
    if "transport" in _overrides:
        override = _overrides["transport"]
        if not isinstance(override, HttpTransport):
            raise TypeError("Override for 'transport' must be an HttpTransport instance")
        return override

    settings = get_settings()
    return HttpTransport(
        settings.url,
        timeout=settings.timeout,
        verify_ssl=settings.verify_ssl,
    )


@lru_cache(maxsize=1)
def get_jsonrpc_client() -> JsonRpcClient:
    """Create and cache JSON-RPC client on top of get_transport()."""
    if "client" in _overrides:
        override = _overrides["client"]
        if not isinstance(override, JsonRpcClient):
            raise TypeError("Override for 'client' must be a JsonRpcClient instance")
        return override

    return JsonRpcClient(get_transport())


@lru_cache(maxsize=1)
def get_api() -> ZabbixAPI:
    """Create and cache the API facade.

    Shares get_jsonrpc_client(), and logs in once if settings carry credentials.
    """
    if "api" in _overrides:
        override = _overrides["api"]
        if not isinstance(override, ZabbixAPI):
            raise TypeError("Override for 'api' must be a ZabbixAPI instance")
        return override

    return ZabbixAPI.from_settings(get_settings(), client=get_jsonrpc_client())


def reset_container() -> None:
    """Reset container state for testing.

    Clears all caches and overrides.
    """
    clear_overrides()
    get_settings.cache_clear()
    get_transport.cache_clear()
    get_jsonrpc_client.cache_clear()
    get_api.cache_clear()
