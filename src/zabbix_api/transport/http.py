"""HTTP transport layer implementation.

This module posts already-encoded JSON-RPC payloads to the Zabbix API
endpoint and returns the decoded JSON body. It has NO knowledge of the
JSON-RPC envelope or of Zabbix objects.
"""

from __future__ import annotations

from typing import Any

import requests
import structlog
from requests.adapters import HTTPAdapter

from zabbix_api import __version__
from zabbix_api.transport.exceptions import (
    HttpError,
    MalformedResponseError,
    NetworkError,
    TimeoutError,
    TransportError,
)

logger = structlog.get_logger()

CONTENT_TYPE = "application/json-rpc"
DEFAULT_USER_AGENT = f"zabbix-api-client/{__version__}"


class HttpTransport:
    """HTTP transport for the Zabbix JSON-RPC endpoint.

    Every call is a single blocking POST. There is no retry: a failed
    attempt is reported to the caller as one failed call. Connections are
    reused by the underlying ``requests.Session``.

    Args:
        url: Full endpoint URL (e.g., "http://zabbix.local/api_jsonrpc.php")
        timeout: Request timeout in seconds (default: None, wait forever)
        verify_ssl: Whether to verify SSL certificates (default: True)
        user_agent: Value of the User-Agent header

    Attributes:
        url: Endpoint URL
        timeout: Request timeout in seconds (or None)
        verify_ssl: SSL verification flag
        user_agent: User-Agent header value
        session: requests session without retries

    Example:
        >>> transport = HttpTransport("http://zabbix.local/api_jsonrpc.php")
        >>> transport.post(b'{"jsonrpc": "2.0", "method": "apiinfo.version", "params": {}, "id": 1}')
        {'jsonrpc': '2.0', 'result': '6.0.0', 'id': 1}
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """Initialize HTTP transport.

        Raises:
            ValueError: If url is empty
        """
        if not url:
            raise ValueError("url cannot be empty")

        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.user_agent = user_agent
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session that never retries."""
        session = requests.Session()

        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def post(
        self,
        payload: bytes,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send an encoded JSON-RPC payload and return the decoded body.

        The whole response body is read before returning.

        Args:
            payload: UTF-8 JSON request body
            headers: Optional extra HTTP headers (override the defaults)

        Returns:
            Parsed JSON response body

        Raises:
            NetworkError: If connection fails
            TimeoutError: If request times out
            HttpError: If server returns error status code
            MalformedResponseError: If the body is not JSON
            TransportError: For other transport-level errors
        """
        request_headers = {
            "Content-Type": CONTENT_TYPE,
            "User-Agent": self.user_agent,
        }
        if headers:
            request_headers.update(headers)

        logger.debug("POST to Zabbix API", url=self.url, size=len(payload))

        try:
            response = self.session.post(
                self.url,
                data=payload,
                headers=request_headers,
                timeout=self.timeout,
                verify=self.verify_ssl,
            )
        except requests.exceptions.Timeout as e:
            raise TimeoutError(
                message=f"Request timed out after {self.timeout}s",
                cause=e,
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(
                message=f"Connection failed: {str(e)}",
                cause=e,
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                message=f"Transport error: {str(e)}",
                cause=e,
            ) from e

        if response.status_code >= 400:
            raise HttpError(
                message=f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                message="Invalid JSON response from server",
                status_code=response.status_code,
                cause=e,
            ) from e

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
