"""Dict-backed storage, used by tests and the ``memory`` storage mode."""

import copy
from typing import Any

from ..models import Resource
from .base import Between, Record, Storage, new_record, resolve, stamp_changes


def _sort_key(column: str):
    # Missing values sort before present ones, as SQLite orders NULLs.
    def key(record: Record):
        value = record.get(column)
        return (value is not None, value if value is not None else 0)

    return key


def _matches(record: Record, where: Record | None, between: Between | None) -> bool:
    if where:
        for column, value in where.items():
            if record.get(column) != value:
                return False
    if between:
        column, start, end = between
        value = record.get(column)
        if value is None:
            return False
        if start is not None and value < start:
            return False
        if end is not None and value > end:
            return False
    return True


class MemoryStorage(Storage):
    """Keeps every table as an insertion-ordered dict of records.

    Records are copied on the way in and on the way out, so callers can never
    mutate stored state by accident.
    """

    def __init__(self):
        self._tables: dict[str, dict[str, Record]] = {}

    def _table(self, resource: Resource) -> dict[str, Record]:
        return self._tables.setdefault(resource.table, {})

    async def create(self, resource: Resource | str, data: Record) -> Record:
        resource = resolve(resource)
        record = new_record(resource, data)
        self._table(resource)[record["id"]] = copy.deepcopy(record)
        return record

    async def get(self, resource: Resource | str, record_id: str) -> Record | None:
        resource = resolve(resource)
        record = self._table(resource).get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def update(
        self, resource: Resource | str, record_id: str, changes: Record
    ) -> Record | None:
        resource = resolve(resource)
        table = self._table(resource)
        if record_id not in table:
            return None
        table[record_id].update(copy.deepcopy(stamp_changes(resource, changes)))
        return copy.deepcopy(table[record_id])

    async def delete(self, resource: Resource | str, record_id: str) -> bool:
        resource = resolve(resource)
        return self._table(resource).pop(record_id, None) is not None

    async def select(
        self,
        resource: Resource | str,
        *,
        where: Record | None = None,
        between: Between | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        resource = resolve(resource)
        rows = [r for r in self._table(resource).values() if _matches(r, where, between)]
        # Stable sorts applied from the least significant key up.
        for column, descending in reversed(resource.order_by):
            rows.sort(key=_sort_key(column), reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return copy.deepcopy(rows)

    async def delete_where(self, resource: Resource | str, **filters: Any) -> int:
        resource = resolve(resource)
        table = self._table(resource)
        doomed = [rid for rid, r in table.items() if _matches(r, filters, None)]
        for rid in doomed:
            del table[rid]
        return len(doomed)
