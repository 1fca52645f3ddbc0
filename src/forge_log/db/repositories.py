"""SQLite-backed storage on aiosqlite."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import aiosqlite

from ..models import QUOTES, Resource
from .base import Between, Record, Storage, new_record, resolve, stamp_changes
from .engine import get_db_path, quote_ident


def _encode(kind: str, value: Any) -> Any:
    if value is None:
        return None
    if kind == "timestamp":
        return value.isoformat(timespec="microseconds")
    if kind == "json":
        return json.dumps(value)
    return value


def _decode(kind: str, value: Any) -> Any:
    if value is None:
        return None
    if kind == "timestamp":
        return datetime.fromisoformat(value)
    if kind == "json":
        return json.loads(value)
    return value


def _where_clause(
    resource: Resource, where: Record | None, between: Between | None
) -> tuple[str, list]:
    conditions = []
    params: list = []
    columns = resource.columns
    for column, value in (where or {}).items():
        if value is None:
            conditions.append(f"{quote_ident(column)} IS NULL")
        else:
            conditions.append(f"{quote_ident(column)} = ?")
            params.append(_encode(columns[column], value))
    if between:
        column, start, end = between
        conditions.append(f"{quote_ident(column)} IS NOT NULL")
        if start is not None:
            conditions.append(f"{quote_ident(column)} >= ?")
            params.append(_encode(columns[column], start))
        if end is not None:
            conditions.append(f"{quote_ident(column)} <= ?")
            params.append(_encode(columns[column], end))
    if not conditions:
        return "", params
    return " WHERE " + " AND ".join(conditions), params


def _order_clause(resource: Resource) -> str:
    terms = [
        f"{quote_ident(column)} {'DESC' if descending else 'ASC'}"
        for column, descending in resource.order_by
    ]
    # rowid keeps ties in insertion order
    terms.append("rowid ASC")
    return " ORDER BY " + ", ".join(terms)


class SqliteStorage(Storage):
    """Storage on a SQLite file. Opens one connection per operation."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    def _row_to_record(self, resource: Resource, row: aiosqlite.Row) -> Record:
        """Convert a database row to a plain record."""
        keys = row.keys()
        return {
            column: _decode(kind, row[column]) if column in keys else None
            for column, kind in resource.columns.items()
        }

    async def create(self, resource: Resource | str, data: Record) -> Record:
        resource = resolve(resource)
        record = new_record(resource, data)
        columns = resource.columns
        names = [c for c in record if c in columns]
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                f"INSERT INTO {quote_ident(resource.table)} "
                f"({', '.join(quote_ident(c) for c in names)}) "
                f"VALUES ({', '.join('?' for _ in names)})",
                [_encode(columns[c], record[c]) for c in names],
            )
            await db.commit()
        return {column: record.get(column) for column in columns}

    async def get(self, resource: Resource | str, record_id: str) -> Record | None:
        resource = resolve(resource)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"SELECT * FROM {quote_ident(resource.table)} WHERE id = ?",
                (record_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(resource, row)

    async def update(
        self, resource: Resource | str, record_id: str, changes: Record
    ) -> Record | None:
        resource = resolve(resource)
        stamped = stamp_changes(resource, changes)
        if stamped:
            columns = resource.columns
            assignments = ", ".join(f"{quote_ident(c)} = ?" for c in stamped)
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    f"UPDATE {quote_ident(resource.table)} SET {assignments} WHERE id = ?",
                    [_encode(columns[c], v) for c, v in stamped.items()] + [record_id],
                )
                await db.commit()
                if cursor.rowcount == 0:
                    return None
        return await self.get(resource, record_id)

    async def delete(self, resource: Resource | str, record_id: str) -> bool:
        resource = resolve(resource)
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"DELETE FROM {quote_ident(resource.table)} WHERE id = ?", (record_id,)
            )
            await db.commit()
            return cursor.rowcount > 0

    async def select(
        self,
        resource: Resource | str,
        *,
        where: Record | None = None,
        between: Between | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        resource = resolve(resource)
        clause, params = _where_clause(resource, where, between)
        sql = f"SELECT * FROM {quote_ident(resource.table)}{clause}{_order_clause(resource)}"
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(sql, params)
            rows = await cursor.fetchall()
            return [self._row_to_record(resource, row) for row in rows]

    async def delete_where(self, resource: Resource | str, **filters: Any) -> int:
        resource = resolve(resource)
        clause, params = _where_clause(resource, filters, None)
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"DELETE FROM {quote_ident(resource.table)}{clause}", params
            )
            await db.commit()
            return cursor.rowcount

    async def random_active_quote(self) -> Record | None:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"SELECT * FROM {quote_ident(QUOTES.table)} "
                "WHERE is_active = 1 ORDER BY RANDOM() LIMIT 1"
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_record(QUOTES, row)
