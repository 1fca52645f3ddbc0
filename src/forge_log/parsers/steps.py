"""Step-count CSV import and export: ``Date,Steps,Distance,Floors Ascended``."""

from pydantic import ValidationError

from ..models import STEP_ENTRIES
from .base import (
    ParseResult,
    format_validation_error,
    optional_float,
    optional_int,
    parse_date,
    read_csv,
    write_csv,
)

STEPS_HEADER = ["Date", "Steps", "Distance", "Floors Ascended"]


def parse_steps_csv(text: str) -> ParseResult:
    """Parse step rows. The first row is the header."""
    result = ParseResult()
    rows = read_csv(text)

    for number, row in enumerate(rows[1:], start=2):
        if len(row) < 2:
            result.errors.append(f"Line {number}: expected at least 2 columns")
            continue
        try:
            payload = {
                "date": parse_date(row[0]),
                "steps": optional_int(row[1]),
                "distance": optional_float(row[2]) if len(row) > 2 else None,
                "floors_ascended": optional_int(row[3]) if len(row) > 3 else None,
            }
        except ValueError as e:
            result.errors.append(f"Line {number}: {e}")
            continue
        try:
            result.items.append(STEP_ENTRIES.validate_insert(payload))
        except ValidationError as e:
            result.errors.append(f"Line {number}: {format_validation_error(e)}")

    return result


def write_steps_csv(entries: list[dict]) -> str:
    """Render step entries as CSV, newest first, ISO dates."""
    ordered = sorted(entries, key=lambda e: e["date"], reverse=True)
    rows = [
        [
            entry["date"].strftime("%Y-%m-%d"),
            entry["steps"],
            "" if entry.get("distance") is None else entry["distance"],
            "" if entry.get("floors_ascended") is None else entry["floors_ascended"],
        ]
        for entry in ordered
    ]
    return write_csv(STEPS_HEADER, rows)
