"""Shared helpers for the text and CSV importers."""

import csv
import io
from dataclasses import dataclass, field
from datetime import datetime

from pydantic import ValidationError

from ..models.base import parse_timestamp

# Placeholder the RENPHO app writes for a missing measurement.
MISSING = "--"

DATE_FORMATS = ("%m/%d/%y", "%m/%d/%Y")


@dataclass
class ParseResult:
    """Rows a parser accepted, plus one message per rejected row."""

    items: list[dict] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.errors)


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() in ("", MISSING)


def parse_date(value: str) -> datetime:
    """Parse ``M/D/YY``, ``M/D/YYYY`` or ISO-8601 into a naive UTC datetime.

    Raises:
        ValueError: If the text matches none of the accepted formats.
    """
    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    parsed = parse_timestamp(text)
    if isinstance(parsed, datetime):
        return parsed
    raise ValueError(f"unrecognized date '{text}'")


def optional_float(value: str | None) -> float | None:
    if is_blank(value):
        return None
    return float(value.strip())


def optional_int(value: str | None) -> int | None:
    if is_blank(value):
        return None
    return int(float(value.strip()))


def optional_text(value: str | None) -> str | None:
    if is_blank(value):
        return None
    return value.strip()


def read_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows, dropping blank lines."""
    reader = csv.reader(io.StringIO(text.strip()))
    return [row for row in reader if any(cell.strip() for cell in row)]


def write_csv(header: list[str], rows: list[list]) -> str:
    """Render rows as CSV text with ``\\n`` line endings."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(header)
    writer.writerows(rows)
    return out.getvalue()


def format_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic error into one line for an import report."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error["loc"]) or "value"
        parts.append(f"{loc}: {error['msg']}")
    return "; ".join(parts)
