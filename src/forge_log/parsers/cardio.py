"""Free-text cardio session parsing.

Turns a dictated sentence such as ``"ran 3.1 miles in 28 minutes, 350
calories, heart rate 152, rpe 7"`` into a draft cardio log entry. The draft
is returned to the caller for review; nothing is stored.
"""

import re

from ..utils.metrics import format_pace, parse_distance_miles

ACTIVITY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Running", ("ran", "run", "running", "jog", "jogged", "jogging", "treadmill")),
    ("Walking", ("walk", "walked", "walking")),
    ("Cycling", ("bike", "biked", "biking", "cycle", "cycled", "cycling", "rode", "spin")),
    ("Swimming", ("swim", "swam", "swimming", "laps")),
    ("Rowing", ("row", "rowed", "rowing", "rower")),
    ("Hiking", ("hike", "hiked", "hiking")),
    ("Elliptical", ("elliptical",)),
    ("Stair Climber", ("stairs", "stairmaster", "stair")),
]
DEFAULT_ACTIVITY = "Other"

_NUM = r"(\d+(?:\.\d+)?)"
DISTANCE_RE = re.compile(
    _NUM + r"\s*(miles?|mi|kilometers?|kilometres?|km|k|meters?|metres?)\b", re.IGNORECASE
)
HOURS_RE = re.compile(_NUM + r"\s*(?:hours?|hrs?|h)\b", re.IGNORECASE)
MINUTES_RE = re.compile(_NUM + r"\s*(?:minutes?|mins?)\b", re.IGNORECASE)
CLOCK_RE = re.compile(r"\b(?:in|for|time)\s+(\d+):(\d{2})\b", re.IGNORECASE)
CALORIES_RE = re.compile(r"(\d+)\s*(?:calories|cals?|kcal)\b", re.IGNORECASE)
HEART_RATE_RE = re.compile(
    # "hr" right after a number is the hour unit, not heart rate
    r"(?<!\d\s)(?<!\d\s\s)\b(?:heart\s*rate|hr)\b\D{0,12}(\d{2,3})|(\d{2,3})\s*bpm\b",
    re.IGNORECASE,
)
RPE_RE = re.compile(r"\brpe\D{0,6}(\d{1,2})\b", re.IGNORECASE)


def detect_activity(text: str) -> str:
    words = set(re.findall(r"[a-z]+", text.lower()))
    for activity, keywords in ACTIVITY_KEYWORDS:
        if words.intersection(keywords):
            return activity
    return DEFAULT_ACTIVITY


def _duration_minutes(text: str) -> float | None:
    clock = CLOCK_RE.search(text)
    if clock:
        return int(clock.group(1)) + int(clock.group(2)) / 60
    hours = HOURS_RE.search(text)
    minutes = MINUTES_RE.search(text)
    if not hours and not minutes:
        return None
    total = 0.0
    if hours:
        total += float(hours.group(1)) * 60
    if minutes:
        total += float(minutes.group(1))
    return total


def parse_cardio_text(text: str) -> dict:
    """Extract a draft cardio entry from free text.

    Returns:
        camelCase draft fields; anything not mentioned is left out except
        ``activityType`` and ``notes``.
    """
    draft: dict = {"activityType": detect_activity(text), "notes": text.strip()}

    distance = DISTANCE_RE.search(text)
    if distance:
        draft["distance"] = f"{distance.group(1)} {distance.group(2).lower()}"

    duration = _duration_minutes(text)
    if duration is not None:
        draft["duration"] = round(duration, 2)

    if distance and duration:
        pace = format_pace(duration, parse_distance_miles(draft["distance"]))
        if pace:
            draft["pace"] = pace

    calories = CALORIES_RE.search(text)
    if calories:
        draft["calories"] = int(calories.group(1))

    heart_rate = HEART_RATE_RE.search(text)
    if heart_rate:
        draft["heartRate"] = int(heart_rate.group(1) or heart_rate.group(2))

    rpe = RPE_RE.search(text)
    if rpe and 0 <= int(rpe.group(1)) <= 10:
        draft["rpe"] = int(rpe.group(1))

    return draft
