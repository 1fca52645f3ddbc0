"""Derived values computed on request from stored entities. Nothing here persists."""

import re
from datetime import datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..models import BLOOD_MARKERS, BLOOD_RATIOS, WORKOUT_ROTATION

NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")
DISTANCE_RE = re.compile(
    r"(?P<value>\d+(?:\.\d+)?)\s*(?P<unit>miles?|mi|kilometers?|kilometres?|km|k|meters?|metres?|m)?\b",
    re.IGNORECASE,
)
TIME_RE = re.compile(r"^\s*(?:(\d+):)?(\d{1,2}):(\d{2}(?:\.\d+)?)\s*$")

KM_TO_MILES = 0.621371
METERS_PER_MILE = 1609.344

# Rolling summary windows, in days, ending on the reference date.
SUMMARY_WINDOWS = {"week": 7, "month": 30, "year": 365}


def parse_number(value) -> float | None:
    """First number in a value such as ``185``, ``"185 lbs"`` or ``"12.5"``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = NUMBER_RE.search(str(value))
    return float(match.group()) if match else None


def parse_time_seconds(value: str | None) -> float | None:
    """Parse ``m:ss`` or ``h:mm:ss`` into seconds."""
    if not value:
        return None
    match = TIME_RE.match(value)
    if not match:
        return None
    hours, minutes, seconds = match.groups()
    return int(hours or 0) * 3600 + int(minutes) * 60 + float(seconds)


def parse_record_value(value: str | None) -> float | None:
    """Numeric reading of a personal-record field: times as seconds, else a number."""
    if value is None or str(value).strip() == "":
        return None
    seconds = parse_time_seconds(str(value))
    if seconds is not None:
        return seconds
    return parse_number(value)


def change(previous: float | None, new: float | None) -> tuple[float | None, float | None]:
    """Signed delta and percentage change between two readings.

    The percentage is None unless the previous value is positive.
    """
    if previous is None or new is None:
        return None, None
    delta = round(new - previous, 4)
    if not previous or previous <= 0:
        return delta, None
    return delta, round(delta / previous * 100, 2)


def bodyweight_percentage(pr_weight, body_weight) -> str | None:
    """A lift as a percentage of body weight, to one decimal place.

    Returns None when either value is missing, unparseable or not positive.
    """
    lift = parse_number(pr_weight)
    body = parse_number(body_weight)
    if lift is None or body is None or lift <= 0 or body <= 0:
        return None
    return f"{lift / body * 100:.1f}"


def parse_distance_miles(text) -> float | None:
    """Normalize a distance such as ``"3.1 miles"``, ``"5k"`` or ``"800 m"`` to miles.

    Bare numbers are taken as miles.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)):
        return float(text)
    match = DISTANCE_RE.search(str(text))
    if not match:
        return None
    value = float(match.group("value"))
    unit = (match.group("unit") or "mi").lower()
    if unit.startswith("k"):
        return round(value * KM_TO_MILES, 3)
    if unit == "m" or unit.startswith("met"):
        return round(value / METERS_PER_MILE, 3)
    return value


def format_pace(duration_minutes: float | None, miles: float | None) -> str:
    """Minutes per mile as ``m:ss /mi``, or an empty string."""
    if not duration_minutes or not miles or miles <= 0:
        return ""
    total_seconds = round(duration_minutes * 60 / miles)
    return f"{total_seconds // 60}:{total_seconds % 60:02d} /mi"


def get_zone(name: str) -> tzinfo:
    """Resolve an IANA zone name. UTC needs no tz database."""
    if name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone '{name}'") from None


def local_day(zone_name: str, now: datetime | None = None) -> str:
    """Calendar day, as ``YYYY-MM-DD``, in the given zone.

    ``now`` is an aware datetime or a naive UTC one.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(get_zone(zone_name)).date().isoformat()


def next_workout_category(latest: str | None) -> str:
    """The day after ``latest`` in the training rotation, wrapping around."""
    rotation = [c.value for c in WORKOUT_ROTATION]
    if latest not in rotation:
        return rotation[0]
    return rotation[(rotation.index(latest) + 1) % len(rotation)]


def _window(reference: datetime, days: int) -> tuple[datetime, datetime]:
    end = datetime.combine(reference.date(), time.max)
    start = datetime.combine(reference.date() - timedelta(days=days - 1), time.min)
    return start, end


def step_summary(entries: list[dict], reference: datetime) -> dict:
    """Step totals and daily averages over the rolling windows."""
    summary = {}
    for name, days in SUMMARY_WINDOWS.items():
        start, end = _window(reference, days)
        selected = [e for e in entries if start <= e["date"] <= end]
        total = sum(e.get("steps") or 0 for e in selected)
        summary[name] = {
            "days": len(selected),
            "totalSteps": total,
            "averageSteps": round(total / len(selected)) if selected else 0,
            "totalDistance": round(sum(e.get("distance") or 0 for e in selected), 2),
        }
    return summary


def cardio_summary(entries: list[dict], reference: datetime) -> dict:
    """Session counts, minutes, miles and calories over the rolling windows."""
    summary = {}
    for name, days in SUMMARY_WINDOWS.items():
        start, end = _window(reference, days)
        selected = [e for e in entries if start <= e["date"] <= end]
        summary[name] = {
            "sessions": len(selected),
            "totalMinutes": round(sum(e.get("duration") or 0 for e in selected), 2),
            "totalMiles": round(
                sum(parse_distance_miles(e.get("distance")) or 0 for e in selected), 2
            ),
            "totalCalories": sum(e.get("calories") or 0 for e in selected),
        }
    return summary


def blood_deltas(current: dict, previous: dict | None) -> dict:
    """Per-marker change from the previous panel to the current one.

    Only markers present on both panels are included.
    """
    if previous is None:
        return {}
    deltas = {}
    for key in [m.key for m in BLOOD_MARKERS] + BLOOD_RATIOS:
        new, old = current.get(key), previous.get(key)
        if new is None or old is None:
            continue
        delta, percent = change(old, new)
        deltas[key] = {
            "previous": old,
            "current": new,
            "change": delta,
            "percentChange": percent,
        }
    return deltas
