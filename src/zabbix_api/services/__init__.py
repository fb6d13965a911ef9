"""Service layer for the Zabbix API client.

Services turn typed Zabbix object records into JSON-RPC calls and back:
- Session handling (login, logout, version)
- Create/get/update/delete for each object type
- Id write-back after create and id clearing after delete
- Result count checks
"""

from __future__ import annotations

from zabbix_api.services.base import ResourceService
from zabbix_api.services.action import ActionService
from zabbix_api.services.user import UserService
from zabbix_api.services.host_group import HostGroupService
from zabbix_api.services.session import SessionService

__all__ = [
    "ResourceService",
    "ActionService",
    "UserService",
    "HostGroupService",
    "SessionService",
]
