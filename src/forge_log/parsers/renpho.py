"""RENPHO smart-scale CSV import and export."""

from pydantic import ValidationError

from ..models import WEIGHT_ENTRIES
from .base import (
    MISSING,
    ParseResult,
    format_validation_error,
    optional_float,
    optional_int,
    optional_text,
    parse_date,
    read_csv,
    write_csv,
)

RENPHO_HEADER = [
    "Date", " Time", " Weight(lb)", "Body Fat(%)", "Fat-Free Mass(lb)",
    "Muscle Mass(lb)", "BMI", "Subcutaneous Fat(%)", "Skeletal Muscle(%)",
    "Body Water(%)", "Visceral Fat", "Bone Mass(lb)", "Protein (%)", "BMR(kcal)",
    "Metabolic Age", "Optimal Weight(lb)", "Target to optimal weight(lb)",
    "Target to optimal fat mass(lb)", "Target to optimal muscle mass(lb)",
    "Body Type", "Remarks",
]

# Column order after Date and Time, with the converter for each field.
RENPHO_COLUMNS = [
    ("weight", optional_float),
    ("body_fat", optional_float),
    ("fat_free_mass", optional_float),
    ("muscle_mass", optional_float),
    ("bmi", optional_float),
    ("subcutaneous_fat", optional_float),
    ("skeletal_muscle", optional_float),
    ("body_water", optional_float),
    ("visceral_fat", optional_int),
    ("bone_mass", optional_float),
    ("protein", optional_float),
    ("bmr", optional_int),
    ("metabolic_age", optional_int),
    ("optimal_weight", optional_float),
    ("target_to_optimal_weight", optional_float),
    ("target_to_optimal_fat_mass", optional_float),
    ("target_to_optimal_muscle_mass", optional_float),
    ("body_type", optional_text),
    ("remarks", optional_text),
]

MIN_COLUMNS = 3


def parse_renpho_csv(text: str) -> ParseResult:
    """Parse a RENPHO export. The first row is always the header."""
    result = ParseResult()
    rows = read_csv(text)

    for number, row in enumerate(rows[1:], start=2):
        if len(row) < MIN_COLUMNS:
            result.errors.append(
                f"Line {number}: expected at least {MIN_COLUMNS} columns, got {len(row)}"
            )
            continue
        try:
            payload = {"date": parse_date(row[0]), "time": optional_text(row[1])}
            for index, (name, convert) in enumerate(RENPHO_COLUMNS, start=2):
                if index < len(row):
                    value = convert(row[index])
                    if value is not None:
                        payload[name] = value
        except ValueError as e:
            result.errors.append(f"Line {number}: {e}")
            continue
        try:
            result.items.append(WEIGHT_ENTRIES.validate_insert(payload))
        except ValidationError as e:
            result.errors.append(f"Line {number}: {format_validation_error(e)}")

    return result


def _cell(value) -> str:
    if value is None or value == "":
        return MISSING
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def write_renpho_csv(entries: list[dict]) -> str:
    """Render weight entries in RENPHO column order, newest first."""
    ordered = sorted(entries, key=lambda e: e["date"], reverse=True)
    rows = []
    for entry in ordered:
        date = entry["date"]
        rows.append(
            [f"{date.month}/{date.day}/{date:%y}", _cell(entry.get("time"))]
            + [_cell(entry.get(name)) for name, _ in RENPHO_COLUMNS]
        )
    return write_csv(RENPHO_HEADER, rows)
