"""Zabbix object records.

Each record mirrors a Zabbix API object one field per attribute; the wire
name of a field is its alias. Fields left as ``None`` are not sent, and
fields the server returns that a record does not declare are ignored.

References:
    https://www.zabbix.com/documentation/current/en/manual/api/reference/action/object
    https://www.zabbix.com/documentation/current/en/manual/api/reference/user/object
    https://www.zabbix.com/documentation/current/en/manual/api/reference/hostgroup/object
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ZabbixObject(BaseModel):
    """Base class for Zabbix object records.

    Subclasses name the attribute that holds the server-assigned id in
    ``id_field``. The client only ever writes that attribute: after a
    successful create it holds the new id, after a successful delete it is
    ``None`` again.
    """

    id_field: ClassVar[str]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def id_key(cls) -> str:
        """Wire name of the id field (e.g. "actionid")."""
        field = cls.model_fields[cls.id_field]
        return field.alias or cls.id_field

    def get_id(self) -> str | None:
        return getattr(self, self.id_field)

    def set_id(self, value: str | None) -> None:
        setattr(self, self.id_field, value)

    def to_params(self) -> dict[str, Any]:
        """Serialize the record as it is sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Actions


class Condition(BaseModel):
    """Condition of an action filter."""

    condition_type: str = Field(alias="conditiontype")
    operator: str
    value: str

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Filter(BaseModel):
    """Action filter: how conditions are combined and the conditions."""

    eval_type: str = Field(alias="evaltype")
    formula: str | None = None
    conditions: list[Condition] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OperationGroup(BaseModel):
    """Host group affected by an operation."""

    group_id: str = Field(alias="groupid")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class OperationTemplate(BaseModel):
    """Template affected by an operation."""

    template_id: str = Field(alias="templateid")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Operation(BaseModel):
    """Operation performed when an action fires."""

    operation_type: str = Field(alias="operationtype")
    op_group: list[OperationGroup] | None = Field(default=None, alias="opgroup")
    op_templates: list[OperationTemplate] | None = Field(default=None, alias="optemplate")
    op_command: Any = Field(default=None, alias="opcommand")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Action(ZabbixObject):
    """Zabbix action object."""

    id_field: ClassVar[str] = "action_id"

    action_id: str | None = Field(default=None, alias="actionid")
    name: str
    event_source: str = Field(alias="eventsource")
    status: str | None = None
    esc_period: str | None = None
    filter: Filter | None = None
    operations: list[Operation] = Field(default_factory=list)


# Users


class UserGroupRef(BaseModel):
    """User group a user belongs to."""

    usrgrp_id: str = Field(alias="usrgrpid")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class User(ZabbixObject):
    """Zabbix user object.

    ``password`` is write-only: the server never returns it.
    """

    id_field: ClassVar[str] = "user_id"

    user_id: str | None = Field(default=None, alias="userid")
    username: str
    password: str | None = Field(default=None, alias="passwd")
    name: str | None = None
    surname: str | None = None
    role_id: str | None = Field(default=None, alias="roleid")
    user_groups: list[UserGroupRef] | None = Field(default=None, alias="usrgrps")


# Host groups


class HostGroup(ZabbixObject):
    """Zabbix host group object."""

    id_field: ClassVar[str] = "group_id"

    group_id: str | None = Field(default=None, alias="groupid")
    name: str
