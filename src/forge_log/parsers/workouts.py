"""Pipe-delimited workout day import.

Each row is ``ORDER|TITLE|WEIGHT|REPS|NOTES``. Notes may contain further
pipes; everything after the fourth separator belongs to them.
"""

from pydantic import ValidationError

from ..models import EXERCISES
from .base import ParseResult, format_validation_error

FIELD_COUNT = 5


def _is_header(fields: list[str]) -> bool:
    return fields[0].strip().upper() == "ORDER" and fields[1].strip().upper() == "TITLE"


def _parse_number(value: str, name: str) -> int:
    text = value.strip()
    if not text:
        return 0
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{text}'") from None
    if not number.is_integer():
        raise ValueError(f"{name} must be a whole number, got '{text}'")
    return int(number)


def parse_workout_text(text: str, category: str) -> ParseResult:
    """Parse workout rows for one category.

    Args:
        text: Pasted text or file contents.
        category: Workout-day category every row is assigned to.

    Returns:
        Validated exercise payloads in file order, and ``Line N: ...``
        messages for rejected rows.
    """
    result = ParseResult()
    seen_data = False

    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue

        fields = line.split("|", FIELD_COUNT - 1)
        if not seen_data and len(fields) >= 2 and _is_header(fields):
            continue
        seen_data = True

        if len(fields) < FIELD_COUNT:
            result.errors.append(
                f"Line {number}: expected {FIELD_COUNT} fields "
                f"(ORDER|TITLE|WEIGHT|REPS|NOTES), got {len(fields)}"
            )
            continue

        order_text, title, weight_text, reps_text, notes = fields
        title = title.strip()
        if not title:
            result.errors.append(f"Line {number}: title is required")
            continue

        try:
            order = _parse_number(order_text, "order")
            weight = _parse_number(weight_text, "weight")
            reps = _parse_number(reps_text, "reps")
        except ValueError as e:
            result.errors.append(f"Line {number}: {e}")
            continue

        payload = {
            "name": title,
            "weight": weight,
            "reps": reps,
            "notes": notes.strip(),
            "category": category,
            "order": order,
        }
        try:
            result.items.append(EXERCISES.validate_insert(payload))
        except ValidationError as e:
            result.errors.append(f"Line {number}: {format_validation_error(e)}")

    return result
