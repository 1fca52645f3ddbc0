"""Audit ledger writer.

Mutations to weight entries, exercises and personal records pass the stored
record from before and after the change; this service decides whether a
tracked value moved and, if so, appends one ledger row.
"""

import logging

from ..db import Storage
from ..models import (
    CHANGES_AUDIT,
    PR_CHANGES_AUDIT,
    WEIGHT_AUDIT,
    AuditAction,
    AuditSource,
)
from ..utils.metrics import change, parse_record_value

logger = logging.getLogger(__name__)

# WeightEntry fields snapshotted into every weight audit row.
WEIGHT_TRACKED = ("weight", "body_fat", "muscle_mass", "bmi")

# Fields compared on manual exercise edits and on bulk import.
EXERCISE_TRACKED = ("weight",)
EXERCISE_IMPORT_TRACKED = ("weight", "reps")

PR_TRACKED = ("weight", "reps", "time")


def _weight_row(
    entry_id: str,
    action: AuditAction,
    source: AuditSource,
    entry_date,
    previous: dict | None,
    current: dict | None,
) -> dict:
    row = {
        "weight_entry_id": entry_id,
        "action": action,
        "source": source,
        "entry_date": entry_date,
    }
    for name in WEIGHT_TRACKED:
        old = previous.get(name) if previous else None
        new = current.get(name) if current else None
        delta, percent = change(old, new)
        row[f"previous_{name}"] = old
        row[f"new_{name}"] = new
        row[f"{name}_delta"] = delta
        if name == "weight":
            row["weight_percent_change"] = percent
    return row


class AuditService:
    """Writes append-only audit rows for tracked value changes."""

    def __init__(self, storage: Storage):
        self.storage = storage

    async def _append(self, resource, row: dict) -> dict:
        record = await self.storage.create(resource, resource.validate_insert(row))
        logger.debug("Audit %s: %s", resource.name, record)
        return record

    # Weight entries

    async def weight_created(
        self,
        entry: dict,
        source: AuditSource = AuditSource.MANUAL,
        action: AuditAction = AuditAction.CREATE,
    ) -> dict:
        """Record a new entry. Only the new values are filled in."""
        row = _weight_row(entry["id"], action, source, entry.get("date"), None, entry)
        return await self._append(WEIGHT_AUDIT, row)

    async def weight_updated(
        self,
        previous: dict,
        current: dict,
        source: AuditSource = AuditSource.MANUAL,
    ) -> dict | None:
        """Record an edit. Returns None when no tracked field changed."""
        if all(previous.get(n) == current.get(n) for n in WEIGHT_TRACKED):
            return None
        row = _weight_row(
            current["id"], AuditAction.UPDATE, source, current.get("date"), previous, current
        )
        return await self._append(WEIGHT_AUDIT, row)

    async def weight_deleted(
        self, previous: dict, source: AuditSource = AuditSource.MANUAL
    ) -> dict:
        """Record a deletion. Only the previous values are filled in."""
        row = _weight_row(
            previous["id"], AuditAction.DELETE, source, previous.get("date"), previous, None
        )
        return await self._append(WEIGHT_AUDIT, row)

    # Exercises

    async def _exercise_row(
        self,
        exercise: dict,
        field: str,
        old,
        new,
        action: AuditAction,
        source: AuditSource,
    ) -> dict:
        delta, percent = change(old, new)
        return await self._append(
            CHANGES_AUDIT,
            {
                "exercise_id": exercise["id"],
                "exercise_name": exercise["name"],
                "category": exercise["category"],
                "field": field,
                "previous_value": old,
                "new_value": new,
                "delta": delta,
                "percentage_change": percent,
                "action": action,
                "source": source,
            },
        )

    async def exercise_updated(
        self,
        previous: dict,
        current: dict,
        source: AuditSource = AuditSource.MANUAL,
    ) -> list[dict]:
        """Record manual edits of tracked exercise fields, one row per field."""
        rows = []
        for name in EXERCISE_TRACKED:
            old, new = previous.get(name), current.get(name)
            if old != new:
                rows.append(
                    await self._exercise_row(
                        current, name, old, new, AuditAction.UPDATE, source
                    )
                )
        return rows

    async def exercise_imported(self, prior: dict | None, imported: dict) -> list[dict]:
        """Flag fields that went up relative to the prior entry of the same exercise.

        Decreases and unchanged values are not recorded on import.
        """
        if prior is None:
            return []
        rows = []
        for name in EXERCISE_IMPORT_TRACKED:
            old, new = prior.get(name), imported.get(name)
            if old is not None and new is not None and new > old:
                rows.append(
                    await self._exercise_row(
                        imported, name, old, new, AuditAction.IMPORT, AuditSource.CSV
                    )
                )
        return rows

    # Personal records

    async def personal_record_updated(
        self,
        previous: dict,
        current: dict,
        source: AuditSource = AuditSource.MANUAL,
    ) -> list[dict]:
        """Record each changed weight/reps/time field of a personal record."""
        rows = []
        for name in PR_TRACKED:
            old, new = previous.get(name) or "", current.get(name) or ""
            if old == new:
                continue
            delta, percent = change(parse_record_value(old), parse_record_value(new))
            rows.append(
                await self._append(
                    PR_CHANGES_AUDIT,
                    {
                        "personal_record_id": current["id"],
                        "exercise": current["exercise"],
                        "category": current["category"],
                        "field": name,
                        "previous_value": old or None,
                        "new_value": new or None,
                        "delta": delta,
                        "percentage_change": percent,
                        "action": AuditAction.UPDATE,
                        "source": source,
                    },
                )
            )
        return rows
