"""Root exception for the Zabbix API client.

Every error raised by the client derives from ``ZabbixAPIError``. Beneath it
sit three families that callers can tell apart:

- ``TransportError`` (``zabbix_api.transport.exceptions``): the request never
  reached the server, or the reply could not be understood as a JSON-RPC
  envelope.
- ``ProtocolError`` (``zabbix_api.protocol.exceptions``): the server rejected
  the call (``RemoteError``) or its result did not have the expected shape
  (``DecodeError``).
- ``ContractError`` (``zabbix_api.services.exceptions``): the reply was well
  formed but inconsistent with what the caller asked for.
"""

from __future__ import annotations


class ZabbixAPIError(Exception):
    """Base exception for all Zabbix API client errors."""

    pass
