"""Generic create/get/update/delete service for Zabbix objects.

Every Zabbix object type exposes the same four methods,
``<object>.create``, ``<object>.get``, ``<object>.update`` and
``<object>.delete``. ``ResourceService`` implements them once; a concrete
service only names the method prefix and the record class.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

import structlog

from zabbix_api.models import ZabbixObject
from zabbix_api.protocol.exceptions import DecodeError
from zabbix_api.protocol.jsonrpc import JsonRpcClient
from zabbix_api.services.exceptions import ExpectedMoreError, ExpectedOneResultError

logger = structlog.get_logger()

RecordT = TypeVar("RecordT", bound=ZabbixObject)


class ResourceService(Generic[RecordT]):
    """CRUD operations for one Zabbix object type.

    Records passed in are owned by the caller. The service only touches
    their id attribute: ``create`` fills it in, ``delete`` clears it, and
    neither does so unless the whole call succeeded.

    Args:
        client: JSON-RPC client for API communication

    Attributes:
        api_prefix: Method prefix (e.g., "action" for "action.get")
        record_type: Record class returned by ``get``
        get_defaults: Query keys ``get`` adds unless the caller set them
    """

    api_prefix: ClassVar[str]
    record_type: ClassVar[type[ZabbixObject]]
    get_defaults: ClassVar[dict[str, Any]] = {"output": "extend"}

    def __init__(self, client: JsonRpcClient) -> None:
        self.client = client

    @property
    def ids_key(self) -> str:
        """Key of the id list in create/update/delete results (e.g. "actionids")."""
        return f"{self.record_type.id_key()}s"

    def _method(self, name: str) -> str:
        return f"{self.api_prefix}.{name}"

    def _call_for_ids(self, name: str, params: list[Any]) -> list[str]:
        method = self._method(name)
        result = self.client.call_typed(method, params, dict[str, Any])
        if self.ids_key not in result:
            raise DecodeError(method, f"object with {self.ids_key!r}")
        ids = result[self.ids_key]
        if not isinstance(ids, list):
            raise DecodeError(method, f"list of {self.ids_key}")
        return [str(object_id) for object_id in ids]

    def create(self, records: Sequence[RecordT]) -> list[str]:
        """Create objects and write the new ids back into ``records``.

        The id at index i of the result belongs to ``records[i]``.

        Returns:
            New ids, in input order

        Raises:
            ExpectedMoreError: The server returned a different number of ids
        """
        ids = self._call_for_ids("create", [record.to_params() for record in records])
        if len(ids) != len(records):
            logger.warning(
                "Create returned unexpected number of ids",
                method=self._method("create"),
                expected=len(records),
                got=len(ids),
            )
            raise ExpectedMoreError(len(records), len(ids))

        for record, object_id in zip(records, ids):
            record.set_id(object_id)
        return ids

    def get(self, params: dict[str, Any] | None = None) -> list[RecordT]:
        """Fetch objects matching ``params``.

        Keys of ``get_defaults`` the caller did not set are added, so by
        default all fields are requested (``"output": "extend"``). The
        caller's mapping is not modified.
        """
        query = dict(params or {})
        for key, value in self.get_defaults.items():
            query.setdefault(key, value)
        return self.client.call_typed(
            self._method("get"), query, list[self.record_type]  # type: ignore[valid-type]
        )

    def get_by_id(self, object_id: str) -> RecordT:
        """Fetch the single object with ``object_id``.

        Raises:
            ExpectedOneResultError: Zero or several objects matched
        """
        records = self.get({self.ids_key: object_id})
        if len(records) != 1:
            logger.warning(
                "Lookup by id did not match exactly one object",
                method=self._method("get"),
                object_id=object_id,
                got=len(records),
            )
            raise ExpectedOneResultError(len(records))
        return records[0]

    def update(self, records: Sequence[RecordT]) -> list[str]:
        """Update objects; every record must already carry its id.

        Returns:
            Ids reported as updated by the server
        """
        return self._call_for_ids("update", [record.to_params() for record in records])

    def delete(self, records: Sequence[RecordT]) -> list[str]:
        """Delete objects and clear the id of every record.

        Ids are cleared only after the whole delete succeeded.

        Raises:
            ValueError: A record has no id (it was never created)
        """
        ids = []
        for record in records:
            object_id = record.get_id()
            if not object_id:
                raise ValueError(
                    f"Cannot delete {self.api_prefix} without {self.record_type.id_key()}"
                )
            ids.append(object_id)
        deleted = self.delete_by_ids(ids)
        for record in records:
            record.set_id(None)
        return deleted

    def delete_by_ids(self, ids: Sequence[str]) -> list[str]:
        """Delete objects by id.

        Raises:
            ExpectedMoreError: The server reported a different number of deleted ids
        """
        deleted = self._call_for_ids("delete", list(ids))
        if len(deleted) != len(ids):
            logger.warning(
                "Delete returned unexpected number of ids",
                method=self._method("delete"),
                expected=len(ids),
                got=len(deleted),
            )
            raise ExpectedMoreError(len(ids), len(deleted))
        return deleted
