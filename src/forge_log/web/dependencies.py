"""Request helpers shared by the API routers."""

import json
from datetime import datetime, time
from typing import Any

from fastapi import Request

from ..db import Storage
from ..errors import BadRequestError, NotFoundError
from ..models import Category, Resource, parse_timestamp, to_json
from ..models.base import utcnow
from ..utils.metrics import local_day

# Keys a JSON import body may carry its text under.
IMPORT_TEXT_KEYS = ("text", "content", "csv", "data")


def get_storage(request: Request) -> Storage:
    """Storage backend attached to the app by ``create_app``."""
    return request.app.state.storage


def get_today(request: Request) -> str:
    """Today's day key in the configured timezone."""
    return local_day(request.app.state.settings.timezone)


def check_category(category: str) -> str:
    """Reject workout-day tags outside the fixed set."""
    if category not in {c.value for c in Category}:
        raise BadRequestError(f"Invalid category: {category}")
    return category


async def require(storage: Storage, resource: Resource, record_id: str) -> dict:
    """Fetch a record or raise NotFoundError."""
    record = await storage.get(resource, record_id)
    if record is None:
        raise NotFoundError(resource.label)
    return record


def dump(records: list[dict]) -> list[dict]:
    return [to_json(r) for r in records]


async def read_import_body(request: Request, list_key: str | None = None) -> str | list:
    """Accept an import as a raw text body, a JSON string, a JSON array,
    or a JSON object wrapping either one.
    """
    try:
        raw = (await request.body()).decode("utf-8-sig")
    except UnicodeDecodeError:
        raise BadRequestError("Import body must be UTF-8 text") from None
    content_type = request.headers.get("content-type", "")
    if "json" not in content_type:
        return raw

    try:
        data: Any = json.loads(raw) if raw.strip() else ""
    except json.JSONDecodeError:
        raise BadRequestError("Invalid JSON body") from None

    if isinstance(data, dict):
        keys = ((list_key,) if list_key else ()) + IMPORT_TEXT_KEYS
        for key in keys:
            if key in data:
                data = data[key]
                break
        else:
            raise BadRequestError(
                f"Expected one of: {', '.join(keys)}"
            )
    if not isinstance(data, (str, list)):
        raise BadRequestError("Import body must be text or an array")
    return data


def parse_bound(value: str | None, name: str, end: bool = False) -> datetime:
    """Parse a range bound from the query string.

    A date-only upper bound covers that whole day.
    """
    if not value:
        raise BadRequestError("startDate and endDate are required")
    parsed = parse_timestamp(value)
    if not isinstance(parsed, datetime):
        raise BadRequestError(f"Invalid {name}: {value}")
    if end and len(value.strip()) == 10:
        parsed = datetime.combine(parsed.date(), time.max)
    return parsed


def reference_date(value: str | None) -> datetime:
    """Reference point for rolling summaries; defaults to now."""
    if not value:
        return utcnow()
    parsed = parse_timestamp(value)
    if not isinstance(parsed, datetime):
        raise BadRequestError(f"Invalid date: {value}")
    return parsed
