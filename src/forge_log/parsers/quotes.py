"""Quote and affirmation text import.

Quotes are pasted one per line as ``"Quote text" - Author``.
"""

from pydantic import ValidationError

from ..models import AFFIRMATIONS, QUOTES
from .base import ParseResult, format_validation_error

AUTHOR_SEPARATOR = " - "
UNKNOWN_AUTHOR = "Unknown"

# First matching group wins; anything else is motivational.
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("fitness", ("gym", "workout", "train", "exercise", "body", "muscle")),
    ("mindset", ("mind", "discipline", "fear", "control")),
    ("success", ("success", "goal", "win", "achieve")),
]
DEFAULT_CATEGORY = "motivational"


def categorize_quote(text: str) -> str:
    """Pick a category from keywords in the quote text."""
    lowered = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _strip_quote_marks(text: str) -> str:
    # One leading and one trailing double quote, no more.
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text.strip()


def parse_quote_line(line: str) -> dict | None:
    """Parse one pasted line into quote fields, or None for a blank line.

    The author is whatever follows the last `` - `` so dashes inside the quote
    survive. A missing author or ``?`` becomes ``Unknown``.
    """
    line = line.strip()
    if not line:
        return None

    index = line.rfind(AUTHOR_SEPARATOR)
    if index == -1:
        text, author = line, UNKNOWN_AUTHOR
    else:
        text = line[:index]
        author = line[index + len(AUTHOR_SEPARATOR):].strip()
        if not author or author == "?":
            author = UNKNOWN_AUTHOR

    text = _strip_quote_marks(text)
    return {"text": text, "author": author, "category": categorize_quote(text)}


def parse_quotes(text: str) -> ParseResult:
    """Parse pasted quote text, one quote per non-empty line."""
    result = ParseResult()
    for number, line in enumerate(text.splitlines(), start=1):
        parsed = parse_quote_line(line)
        if parsed is None:
            continue
        try:
            result.items.append(QUOTES.validate_insert(parsed))
        except ValidationError as e:
            result.errors.append(f"Line {number}: {format_validation_error(e)}")
    return result


def parse_quote_objects(objects: list) -> ParseResult:
    """Validate quotes supplied as JSON objects (camelCase or snake_case keys)."""
    result = ParseResult()
    for number, obj in enumerate(objects, start=1):
        if isinstance(obj, dict) and "category" not in obj and obj.get("text"):
            obj = {**obj, "category": categorize_quote(str(obj["text"]))}
        try:
            result.items.append(QUOTES.validate_insert(obj))
        except ValidationError as e:
            result.errors.append(f"Item {number}: {format_validation_error(e)}")
    return result


def parse_affirmations(text: str) -> ParseResult:
    """One affirmation per non-empty line, inactive until shuffled in."""
    result = ParseResult()
    for number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            result.items.append(AFFIRMATIONS.validate_insert({"text": line}))
        except ValidationError as e:
            result.errors.append(f"Line {number}: {format_validation_error(e)}")
    return result


def parse_affirmation_objects(objects: list) -> ParseResult:
    result = ParseResult()
    for number, obj in enumerate(objects, start=1):
        if isinstance(obj, str):
            obj = {"text": obj.strip()}
        try:
            result.items.append(AFFIRMATIONS.validate_insert(obj))
        except ValidationError as e:
            result.errors.append(f"Item {number}: {format_validation_error(e)}")
    return result
