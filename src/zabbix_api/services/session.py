"""Session service for authenticating against the Zabbix API.

The token obtained by ``login`` is stored on the shared ``JsonRpcClient``
and sent with every later call. There is no automatic refresh: when the
session expires the caller logs in again.
"""

from __future__ import annotations

import structlog

from zabbix_api.protocol.jsonrpc import JsonRpcClient

logger = structlog.get_logger()

LOGIN_METHOD = "user.authenticate"
LOGOUT_METHOD = "user.logout"
VERSION_METHOD = "apiinfo.version"


class SessionService:
    """Service for session operations.

    Args:
        client: JSON-RPC client whose auth token this service manages

    Example:
        >>> session = SessionService(client)
        >>> session.login("Admin", "zabbix")
        '0424bd59b807674191e7d77572075f33'
        >>> client.auth_token
        '0424bd59b807674191e7d77572075f33'
    """

    def __init__(self, client: JsonRpcClient) -> None:
        self.client = client

    def login(self, user: str, password: str) -> str:
        """Authenticate and store the session token on the client.

        The request itself is sent without a token. On failure the token
        already stored on the client is left as it was.

        Returns:
            Session token

        Raises:
            RemoteError: Credentials were rejected
            DecodeError: The server did not return a string token
        """
        token = self.client.call_typed(
            LOGIN_METHOD,
            {"user": user, "password": password},
            str,
            authenticate=False,
        )
        self.client.auth_token = token
        logger.info("Logged in to Zabbix API", user=user)
        return token

    def logout(self) -> bool:
        """End the current session and forget its token.

        Returns:
            True if the server confirmed the logout
        """
        result = self.client.call_typed(LOGOUT_METHOD, [], bool)
        self.client.auth_token = None
        logger.info("Logged out of Zabbix API")
        return result

    def version(self) -> str:
        """Return the API version; needs no authentication."""
        return self.client.call_typed(VERSION_METHOD, {}, str, authenticate=False)
