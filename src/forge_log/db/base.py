"""Storage interface shared by the in-memory and SQLite backends.

Backends implement a handful of primitives over plain snake_case dicts. The
entity-specific queries the routes need are built on those primitives here,
so both backends answer them identically.
"""

import random
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from ..models import (
    AFFIRMATIONS,
    DAILY_SET_PROGRESS,
    DAILY_WORKOUT_STATUS,
    EXERCISE_TEMPLATES,
    EXERCISES,
    MAX_DAILY_SETS,
    PHOTO_PROGRESS,
    QUOTES,
    RESOURCES_BY_NAME,
    STEP_ENTRIES,
    TIMER_LAP_TIMES,
    USER_SETTINGS,
    WEIGHT_ENTRIES,
    WORKOUT_LOGS,
    WORKOUT_NOTES,
    WORKOUT_TIMERS,
    Resource,
)
from ..models.base import utcnow

Record = dict[str, Any]
# (column, lower bound, upper bound), both bounds inclusive and optional.
Between = tuple[str, datetime | None, datetime | None]


def resolve(resource: Resource | str) -> Resource:
    """Accept a Resource or its registered name."""
    if isinstance(resource, Resource):
        return resource
    try:
        return RESOURCES_BY_NAME[resource]
    except KeyError:
        raise ValueError(f"Unknown resource: {resource}") from None


def new_record(resource: Resource, data: Record) -> Record:
    """Stamp a validated insert payload with id and server timestamps."""
    now = utcnow()
    record: Record = dict.fromkeys(resource.columns)
    record["id"] = uuid.uuid4().hex
    record.update(data)
    for name in resource.now_fields:
        if record.get(name) is None:
            record[name] = now
    record["created_at"] = now
    for name in resource.server_fields:
        record[name] = now
    return record


def stamp_changes(resource: Resource, changes: Record) -> Record:
    """Drop keys the caller may not write and refresh server timestamps."""
    writable = set(resource.fields)
    stamped = {k: v for k, v in changes.items() if k in writable}
    now = utcnow()
    for name in resource.server_fields:
        stamped[name] = now
    return stamped


class Storage(ABC):
    """Abstract persistence for every forge-log entity."""

    # Primitives

    @abstractmethod
    async def create(self, resource: Resource | str, data: Record) -> Record:
        """Insert a record, assigning id and created timestamp."""

    @abstractmethod
    async def get(self, resource: Resource | str, record_id: str) -> Record | None:
        """Fetch a record by id, or None."""

    @abstractmethod
    async def update(
        self, resource: Resource | str, record_id: str, changes: Record
    ) -> Record | None:
        """Merge changes into an existing record. Returns None for unknown ids."""

    @abstractmethod
    async def delete(self, resource: Resource | str, record_id: str) -> bool:
        """Delete a record. Returns whether it existed."""

    @abstractmethod
    async def select(
        self,
        resource: Resource | str,
        *,
        where: Record | None = None,
        between: Between | None = None,
        limit: int | None = None,
    ) -> list[Record]:
        """Return records matching equality filters, in the resource's order."""

    @abstractmethod
    async def delete_where(self, resource: Resource | str, **filters: Any) -> int:
        """Delete every record matching the filters. Returns the count."""

    async def close(self) -> None:
        """Release backend resources."""

    # Generic queries

    async def list_all(self, resource: Resource | str) -> list[Record]:
        return await self.select(resource)

    async def find(self, resource: Resource | str, **filters: Any) -> list[Record]:
        return await self.select(resource, where=filters)

    async def find_one(self, resource: Resource | str, **filters: Any) -> Record | None:
        rows = await self.select(resource, where=filters, limit=1)
        return rows[0] if rows else None

    async def upsert_where(
        self, resource: Resource | str, filters: Record, changes: Record
    ) -> Record:
        """Update the first row matching ``filters``, or create it from both."""
        existing = await self.find_one(resource, **filters)
        if existing is None:
            return await self.create(resource, {**filters, **changes})
        return await self.update(resource, existing["id"], changes)

    async def get_by_key(self, resource: Resource | str, key: str) -> Record | None:
        """Look up a keyed settings-style row."""
        resource = resolve(resource)
        if resource.key_field is None:
            raise ValueError(f"{resource.name} has no key field")
        rows = await self.select(resource, where={resource.key_field: key}, limit=1)
        return rows[0] if rows else None

    async def update_by_key(
        self, resource: Resource | str, key: str, changes: Record
    ) -> Record | None:
        existing = await self.get_by_key(resource, key)
        if existing is None:
            return None
        return await self.update(resource, existing["id"], changes)

    async def upsert_by_key(
        self, resource: Resource | str, key: str, data: Record
    ) -> Record:
        """Update the row with this key, or create it."""
        resource = resolve(resource)
        existing = await self.get_by_key(resource, key)
        if existing is not None:
            return await self.update(resource, existing["id"], data)
        return await self.create(resource, {**data, resource.key_field: key})

    async def reorder(
        self, resource: Resource | str, items: list[tuple[str, int]]
    ) -> int:
        """Assign explicit order values. Unknown ids are skipped.

        Returns:
            Number of records updated.
        """
        updated = 0
        for record_id, order in items:
            if await self.update(resource, record_id, {"order": order}) is not None:
                updated += 1
        return updated

    # Entity queries

    async def exercises_by_category(self, category: str) -> list[Record]:
        return await self.find(EXERCISES, category=category)

    async def latest_workout_log(self) -> Record | None:
        rows = await self.select(WORKOUT_LOGS, limit=1)
        return rows[0] if rows else None

    async def weight_entries_in_range(
        self, start: datetime, end: datetime
    ) -> list[Record]:
        return await self.select(WEIGHT_ENTRIES, between=("date", start, end))

    async def step_entries_in_range(
        self, start: datetime | None, end: datetime | None
    ) -> list[Record]:
        return await self.select(STEP_ENTRIES, between=("date", start, end))

    async def latest_step_entry(self) -> Record | None:
        rows = await self.list_all(STEP_ENTRIES)
        return rows[-1] if rows else None

    async def active_quotes(self) -> list[Record]:
        return await self.find(QUOTES, is_active=1)

    async def random_active_quote(self) -> Record | None:
        quotes = await self.active_quotes()
        return random.choice(quotes) if quotes else None

    async def clear_quotes(self) -> int:
        return await self.delete_where(QUOTES)

    async def active_affirmations(self) -> list[Record]:
        return await self.find(AFFIRMATIONS, is_active=1)

    async def photos_by_body_part(self, body_part: str) -> list[Record]:
        return await self.find(PHOTO_PROGRESS, body_part=body_part)

    async def visible_settings(self, resource: Resource | str) -> list[Record]:
        return await self.find(resource, is_visible=1)

    async def get_user_settings(self) -> Record | None:
        rows = await self.select(USER_SETTINGS, limit=1)
        return rows[0] if rows else None

    async def upsert_user_settings(self, changes: Record) -> Record:
        """The settings row is a singleton; create it on first write."""
        existing = await self.get_user_settings()
        if existing is None:
            return await self.create(USER_SETTINGS, changes)
        return await self.update(USER_SETTINGS, existing["id"], changes)

    # Daily tracking

    async def daily_set_progress(self, category: str, day: str) -> list[Record]:
        """Set counts recorded on ``day`` for the exercises of one workout day."""
        exercise_ids = {e["id"] for e in await self.exercises_by_category(category)}
        rows = await self.find(DAILY_SET_PROGRESS, date=day)
        return [r for r in rows if r["exercise_id"] in exercise_ids]

    async def set_daily_sets(self, exercise_id: str, day: str, sets: int) -> Record:
        sets = max(0, min(sets, MAX_DAILY_SETS))
        return await self.upsert_where(
            DAILY_SET_PROGRESS,
            {"exercise_id": exercise_id, "date": day},
            {"sets_completed": sets},
        )

    async def tap_daily_set(self, exercise_id: str, day: str) -> Record:
        """Count one more completed set, stopping at the daily maximum."""
        current = await self.find_one(DAILY_SET_PROGRESS, exercise_id=exercise_id, date=day)
        done = current["sets_completed"] if current else 0
        return await self.set_daily_sets(exercise_id, day, done + 1)

    async def reset_daily_set_progress(self) -> int:
        return await self.delete_where(DAILY_SET_PROGRESS)

    async def get_daily_workout_status(self, category: str, day: str) -> Record | None:
        return await self.find_one(DAILY_WORKOUT_STATUS, category=category, date=day)

    async def set_daily_workout_status(
        self, category: str, day: str, completed: bool
    ) -> Record:
        return await self.upsert_where(
            DAILY_WORKOUT_STATUS,
            {"category": category, "date": day},
            {"is_completed": int(completed)},
        )

    async def reset_daily_workout_status(self) -> int:
        return await self.delete_where(DAILY_WORKOUT_STATUS)

    async def get_workout_note(self, category: str, day: str) -> Record | None:
        return await self.find_one(WORKOUT_NOTES, category=category, date=day)

    async def save_workout_note(self, category: str, day: str, notes: str) -> Record:
        return await self.upsert_where(
            WORKOUT_NOTES, {"category": category, "date": day}, {"notes": notes}
        )

    # Exercise templates

    async def exercise_template_by_name(self, name: str) -> Record | None:
        """Case-insensitive lookup on the trimmed name."""
        wanted = name.strip().casefold()
        for template in await self.list_all(EXERCISE_TEMPLATES):
            if template["name"].casefold() == wanted:
                return template
        return None

    async def get_or_create_exercise_template(self, name: str) -> Record:
        existing = await self.exercise_template_by_name(name)
        if existing is not None:
            return existing
        return await self.create(EXERCISE_TEMPLATES, {"name": name.strip()})

    # Workout timers

    async def get_timer(self, storage_key: str) -> Record | None:
        return await self.get_by_key(WORKOUT_TIMERS, storage_key)

    async def save_timer(self, storage_key: str, data: Record) -> Record:
        return await self.upsert_by_key(WORKOUT_TIMERS, storage_key, data)

    async def delete_timer(self, storage_key: str) -> bool:
        """Delete a timer together with its laps."""
        timer = await self.get_timer(storage_key)
        if timer is None:
            return False
        await self.clear_timer_laps(timer["id"])
        return await self.delete(WORKOUT_TIMERS, timer["id"])

    async def timer_laps(self, timer_id: str) -> list[Record]:
        return await self.find(TIMER_LAP_TIMES, timer_id=timer_id)

    async def add_timer_lap(self, timer_id: str, data: Record) -> Record:
        return await self.create(TIMER_LAP_TIMES, {**data, "timer_id": timer_id})

    async def clear_timer_laps(self, timer_id: str) -> int:
        return await self.delete_where(TIMER_LAP_TIMES, timer_id=timer_id)
