"""Blood lab result import.

Three shapes are accepted:

* a JSON array of panel objects,
* a "long" CSV with one marker per row
  (``marker,value,unit,reference_range,status,time``), grouped into one
  panel per distinct ``time``,
* a "wide" CSV template whose header row names panel fields directly
  (``asOf,source,totalTestosterone,totalTestosteroneUnit,...``).
"""

import json
import re

from pydantic import ValidationError

from ..models import BLOOD_ENTRIES, BLOOD_MARKERS
from ..models.base import column_kind
from .base import ParseResult, format_validation_error, is_blank, parse_date, read_csv

DEFAULT_SOURCE = "csv_import"
LONG_FORMAT_COLUMNS = ("marker", "value", "unit", "reference_range", "status", "time")

FLAGS = {"high": "H", "h": "H", "low": "L", "l": "L"}


def normalize_marker_name(name: str) -> str:
    """Lowercase and collapse punctuation so lab spellings compare equal."""
    return " ".join(re.sub(r"[^a-z0-9]+", " ", name.lower()).split())


def _build_marker_lookup() -> dict[str, str]:
    lookup = {}
    for marker in BLOOD_MARKERS:
        for name in (marker.key, marker.label, *marker.aliases):
            lookup.setdefault(normalize_marker_name(name), marker.key)
    return lookup


MARKER_LOOKUP: dict[str, str] = _build_marker_lookup()


def map_marker(name: str) -> str | None:
    """Map a lab's marker name to a panel field, or None when unknown."""
    return MARKER_LOOKUP.get(normalize_marker_name(name))


def _field_key(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name.lower())


PANEL_FIELDS: dict[str, str] = {
    _field_key(name): name for name in BLOOD_ENTRIES.model.model_fields
}


def _validate(result: ParseResult, payload, label: str) -> None:
    try:
        result.items.append(BLOOD_ENTRIES.validate_insert(payload))
    except ValidationError as e:
        result.errors.append(f"{label}: {format_validation_error(e)}")


def parse_blood_json(text: str) -> ParseResult:
    result = ParseResult()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        result.errors.append(f"Invalid JSON: {e.msg}")
        return result
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        result.errors.append("Invalid JSON: expected an array of panels")
        return result
    for number, item in enumerate(data, start=1):
        _validate(result, item, f"Item {number}")
    return result


def parse_blood_long(rows: list[list[str]]) -> ParseResult:
    """Group marker-per-row results into panels keyed by their time column."""
    result = ParseResult()
    header = [normalize_marker_name(h).replace(" ", "_") for h in rows[0]]
    index = {name: header.index(name) for name in LONG_FORMAT_COLUMNS if name in header}
    panels: dict[str, dict] = {}

    def cell(row: list[str], column: str) -> str:
        position = index.get(column)
        if position is None or position >= len(row):
            return ""
        return row[position].strip()

    for number, row in enumerate(rows[1:], start=2):
        key = map_marker(cell(row, "marker"))
        if key is None:
            continue

        time_text = cell(row, "time")
        if time_text not in panels:
            try:
                as_of = parse_date(time_text)
            except ValueError as e:
                result.errors.append(f"Line {number}: {e}")
                continue
            panels[time_text] = {"as_of": as_of, "source": DEFAULT_SOURCE}
        panel = panels[time_text]

        try:
            panel[key] = float(cell(row, "value"))
        except ValueError:
            result.errors.append(
                f"Line {number}: value for '{cell(row, 'marker')}' is not a number"
            )
            continue
        unit = cell(row, "unit")
        if unit:
            panel[f"{key}_unit"] = unit
        flag = FLAGS.get(cell(row, "status").lower())
        if flag:
            panel[f"{key}_flag"] = flag

    for time_text, panel in panels.items():
        _validate(result, panel, f"Panel {time_text}")
    return result


def parse_blood_wide(rows: list[list[str]]) -> ParseResult:
    """One panel per row; the header names panel fields in any case style."""
    result = ParseResult()
    fields = BLOOD_ENTRIES.model.model_fields
    columns = [PANEL_FIELDS.get(_field_key(h)) for h in rows[0]]

    for number, row in enumerate(rows[1:], start=2):
        payload = {}
        try:
            for name, value in zip(columns, row):
                if name is None or is_blank(value):
                    continue
                kind = column_kind(fields[name].annotation)
                if kind == "real":
                    payload[name] = float(value.strip())
                elif kind == "timestamp":
                    payload[name] = parse_date(value)
                elif kind == "text":
                    payload[name] = value.strip()
        except ValueError as e:
            result.errors.append(f"Line {number}: {e}")
            continue
        payload.setdefault("source", DEFAULT_SOURCE)
        _validate(result, payload, f"Line {number}")
    return result


def parse_blood_import(text: str) -> ParseResult:
    """Detect the import shape and parse it."""
    stripped = text.strip()
    if not stripped:
        return ParseResult(errors=["No data to import"])
    if stripped[0] in "[{":
        return parse_blood_json(stripped)

    rows = read_csv(stripped)
    if len(rows) < 2:
        return ParseResult(errors=["Expected a header row and at least one data row"])
    header = {normalize_marker_name(h) for h in rows[0]}
    if "marker" in header and "value" in header:
        return parse_blood_long(rows)
    return parse_blood_wide(rows)
