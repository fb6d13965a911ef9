"""Service layer exceptions.

Local contract violations: the server reply was a valid, successful
JSON-RPC response, but it does not agree with what the caller asked for.
These are never raised for transport failures or server-side errors.
"""

from __future__ import annotations

from zabbix_api.exceptions import ZabbixAPIError


class ContractError(ZabbixAPIError):
    """Base exception for local contract violations."""

    pass


class ExpectedOneResultError(ContractError):
    """Raised when a lookup by id did not match exactly one object.

    Example:
        >>> str(ExpectedOneResultError(0))
        'Expected exactly one result, got 0.'
    """

    def __init__(self, got: int) -> None:
        super().__init__(f"Expected exactly one result, got {got}.")
        self.got = got


class ExpectedMoreError(ContractError):
    """Raised when the server reports a different number of ids than sent.

    Example:
        >>> str(ExpectedMoreError(3, 2))
        'Expected 3, got 2.'
    """

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(f"Expected {expected}, got {got}.")
        self.expected = expected
        self.got = got
