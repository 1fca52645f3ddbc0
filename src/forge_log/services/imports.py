"""Apply parsed import batches to storage.

Each importer parses, persists the accepted rows one at a time and reports
how many went in. Rejected rows never reach storage.
"""

import logging
from dataclasses import dataclass, field

from ..db import Storage
from ..errors import BadRequestError
from ..models import (
    AFFIRMATIONS,
    BLOOD_ENTRIES,
    EXERCISES,
    QUOTES,
    STEP_ENTRIES,
    WEIGHT_ENTRIES,
    AuditAction,
    AuditSource,
    Category,
)
from ..parsers import (
    ParseResult,
    parse_affirmation_objects,
    parse_affirmations,
    parse_blood_import,
    parse_quote_objects,
    parse_quotes,
    parse_renpho_csv,
    parse_steps_csv,
    parse_workout_text,
)
from .audit import AuditService

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of a bulk import."""

    imported: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    @classmethod
    def from_parse(cls, parsed: ParseResult, imported: int = 0) -> "ImportResult":
        return cls(imported=imported, failed=parsed.failed, errors=list(parsed.errors))

    def to_dict(self) -> dict:
        return {"imported": self.imported, "failed": self.failed, "errors": self.errors}


async def _create_all(storage: Storage, resource, items: list[dict]) -> list[dict]:
    return [await storage.create(resource, item) for item in items]


def _log_result(kind: str, result: ImportResult) -> ImportResult:
    logger.info(
        "Imported %d %s (%d failed)", result.imported, kind, result.failed
    )
    return result


async def import_quotes(
    storage: Storage, data: str | list, append: bool = False
) -> ImportResult:
    """Import quotes from pasted text or a list of objects.

    Unless ``append`` is set, existing quotes are cleared first, but only
    when the batch holds at least one valid quote.
    """
    parsed = parse_quotes(data) if isinstance(data, str) else parse_quote_objects(data)
    if parsed.items and not append:
        cleared = await storage.clear_quotes()
        logger.info("Cleared %d existing quotes", cleared)
    created = await _create_all(storage, QUOTES, parsed.items)
    return _log_result("quotes", ImportResult.from_parse(parsed, len(created)))


async def import_affirmations(storage: Storage, data: str | list) -> ImportResult:
    """Append affirmations from text (one per line) or a list."""
    if isinstance(data, str):
        parsed = parse_affirmations(data)
    else:
        parsed = parse_affirmation_objects(data)
    created = await _create_all(storage, AFFIRMATIONS, parsed.items)
    return _log_result("affirmations", ImportResult.from_parse(parsed, len(created)))


async def _prior_exercises(storage: Storage, category: str) -> dict[str, dict]:
    """Latest known version of each exercise name, preferring the target category."""
    prior: dict[str, dict] = {}
    everything = await storage.list_all(EXERCISES)
    newest_first = sorted(everything, key=lambda e: e["created_at"], reverse=True)
    for exercise in newest_first:
        if exercise["category"] == category:
            prior.setdefault(exercise["name"], exercise)
    for exercise in newest_first:
        prior.setdefault(exercise["name"], exercise)
    return prior


async def import_workouts(storage: Storage, text: str, category: str) -> ImportResult:
    """Replace a workout day's exercises with pipe-delimited rows.

    The existing exercises in ``category`` are always deleted first, even when
    no row parses. Weight and reps that went up against the previous version of
    the same exercise are written to the changes audit.
    """
    if category not in {c.value for c in Category}:
        raise BadRequestError(f"Invalid category: {category}")

    parsed = parse_workout_text(text, category)
    prior = await _prior_exercises(storage, category)
    deleted = await storage.delete_where(EXERCISES, category=category)
    logger.info("Deleted %d existing %s exercises", deleted, category)

    audit = AuditService(storage)
    created = []
    for item in parsed.items:
        exercise = await storage.create(EXERCISES, item)
        await audit.exercise_imported(prior.get(exercise["name"]), exercise)
        created.append(exercise)
    return _log_result("exercises", ImportResult.from_parse(parsed, len(created)))


async def import_weights(storage: Storage, text: str) -> ImportResult:
    """Import a RENPHO CSV export, auditing each new entry."""
    parsed = parse_renpho_csv(text)
    audit = AuditService(storage)
    for item in parsed.items:
        entry = await storage.create(WEIGHT_ENTRIES, item)
        await audit.weight_created(entry, source=AuditSource.CSV, action=AuditAction.IMPORT)
    return _log_result("weight entries", ImportResult.from_parse(parsed, len(parsed.items)))


async def import_blood(storage: Storage, text: str) -> ImportResult:
    parsed = parse_blood_import(text)
    created = await _create_all(storage, BLOOD_ENTRIES, parsed.items)
    return _log_result("blood panels", ImportResult.from_parse(parsed, len(created)))


async def import_steps(storage: Storage, text: str) -> ImportResult:
    parsed = parse_steps_csv(text)
    created = await _create_all(storage, STEP_ENTRIES, parsed.items)
    return _log_result("step entries", ImportResult.from_parse(parsed, len(created)))
