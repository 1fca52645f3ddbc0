"""Text and CSV importers. Parsers are pure: they never touch storage."""

from .base import ParseResult, parse_date
from .blood import map_marker, parse_blood_import
from .cardio import detect_activity, parse_cardio_text
from .quotes import (
    categorize_quote,
    parse_affirmation_objects,
    parse_affirmations,
    parse_quote_line,
    parse_quote_objects,
    parse_quotes,
)
from .renpho import RENPHO_HEADER, parse_renpho_csv, write_renpho_csv
from .steps import STEPS_HEADER, parse_steps_csv, write_steps_csv
from .workouts import parse_workout_text

__all__ = [
    "RENPHO_HEADER",
    "STEPS_HEADER",
    "categorize_quote",
    "detect_activity",
    "map_marker",
    "parse_affirmation_objects",
    "parse_affirmations",
    "parse_blood_import",
    "parse_cardio_text",
    "parse_date",
    "parse_quote_line",
    "parse_quote_objects",
    "parse_quotes",
    "parse_renpho_csv",
    "parse_steps_csv",
    "parse_workout_text",
    "ParseResult",
    "write_renpho_csv",
    "write_steps_csv",
]
