"""User service.

Wraps the ``user.*`` methods of the Zabbix API.
https://www.zabbix.com/documentation/current/en/manual/api/reference/user
"""

from __future__ import annotations

from zabbix_api.models import User
from zabbix_api.services.base import ResourceService


class UserService(ResourceService[User]):
    """Service for user operations."""

    api_prefix = "user"
    record_type = User
