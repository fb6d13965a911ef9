"""Transport layer for the Zabbix API client.

This module handles HTTP communication with no knowledge of JSON-RPC protocol
or Zabbix objects. It is responsible for:
- HTTP POST of encoded request bodies
- Connection reuse through a single requests session
- SSL/TLS verification
- Network error translation
"""

from zabbix_api.transport.exceptions import (
    HttpError,
    MalformedResponseError,
    NetworkError,
    ResponseIdMismatchError,
    TimeoutError,
    TransportError,
)
from zabbix_api.transport.http import HttpTransport

__all__ = [
    "HttpTransport",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "HttpError",
    "MalformedResponseError",
    "ResponseIdMismatchError",
]
