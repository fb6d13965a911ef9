"""Action service.

Wraps the ``action.*`` methods of the Zabbix API.
https://www.zabbix.com/documentation/current/en/manual/api/reference/action
"""

from __future__ import annotations

from zabbix_api.models import Action
from zabbix_api.services.base import ResourceService


class ActionService(ResourceService[Action]):
    """Service for action operations.

    Example:
        >>> service = ActionService(client)
        >>> actions = [Action(name="register", event_source="2", filter=Filter(eval_type="0"))]
        >>> service.create(actions)
        ['7']
        >>> actions[0].action_id
        '7'
    """

    api_prefix = "action"
    record_type = Action
    # action.get leaves out the filter and operations unless asked for them.
    get_defaults = {
        "output": "extend",
        "selectFilter": "extend",
        "selectOperations": "extend",
    }
