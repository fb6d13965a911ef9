"""Host group service.

Wraps the ``hostgroup.*`` methods of the Zabbix API.
"""

from __future__ import annotations

from zabbix_api.models import HostGroup
from zabbix_api.services.base import ResourceService


class HostGroupService(ResourceService[HostGroup]):
    """Service for host group operations."""

    api_prefix = "hostgroup"
    record_type = HostGroup
