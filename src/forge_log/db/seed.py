"""Demo data loaded into an empty store on first boot."""

import logging

from ..models import EXERCISES, QUOTES, SHORTCUT_SETTINGS, TAB_SETTINGS
from .base import Storage

logger = logging.getLogger(__name__)


def _day(category: str, rows: list[tuple[str, int, int, str]]) -> list[dict]:
    return [
        {"name": name, "weight": weight, "reps": reps, "notes": notes,
         "category": category, "order": i}
        for i, (name, weight, reps, notes) in enumerate(rows)
    ]


SEED_EXERCISES: list[dict] = [
    *_day("push", [
        ("Flat Dumbbell Press", 80, 6, "80, 75 lbs | 5–7 reps"),
        ("Incline Dumbbell Press", 70, 6, "70, 65 lbs | 5–7 reps"),
        ("Seated Cable Press", 8, 9, "8,7 down | 8–10 reps"),
        ("Pec Deck", 125, 0, "125 lbs | reps not logged | Seat height 4"),
        ("Dumbbell Shoulder Press", 65, 6, "65 lbs | 6 reps"),
        ("Dumbbell Lateral Raises", 25, 0, "25 lbs | To failure"),
    ]),
    *_day("push2", [
        ("Flat Dumbbell Press", 80, 6, "80, 75 lbs | 5–7 reps"),
        ("Incline Dumbbell Press", 70, 6, "70, 65 lbs | 5–7 reps"),
        ("Seated Cable Press", 8, 9, "8,7 down | 8–10 reps"),
        ("Downward Cable Press", 33, 0, "33 lbs | reps not logged"),
        ("Tricep Extensions (Cable, Single/Double)", 35, 0, "35 lbs | reps not logged"),
        ("Shrugs (DB/KB)", 25, 0, "25 lbs | To failure"),
    ]),
    *_day("pull", [
        ("Pull-Ups (Assisted)", 20, 0, "20 lbs assist | To failure"),
        ("Seated Low Rows (Close Grip)", 70, 0, "~70 lbs (est.) | reps not logged"),
        ("EZ Bar Preacher Curl", 50, 7, "50 lbs | 6–8 reps"),
        ("Tricep Extensions (Cable, Single/Double)", 35, 0, "35 lbs | reps not logged"),
        ("Shrugs (DB)", 25, 0, "25 lbs | To failure"),
        ("Seated Lat Pulldowns (Wide)", 130, 7, "130 lbs | 6–8 reps"),
        ("Incline Dumbbell Curls", 25, 0, "25 lbs | reps not logged"),
        ("Straight Arm Pulldowns (Bar)", 35, 0, "35 lbs | reps not logged"),
    ]),
    *_day("pull2", [
        ("Seated Lat Pulldowns (Wide)", 130, 7, "130 lbs | 6–8 reps"),
        ("Diverging Lat Pulldown", 80, 0, "80 lbs, 60 lbs | reps not logged"),
        ("Standing Dumbbell Curls", 25, 0, "25 lbs | To failure"),
        ("Downward Cable Press", 33, 0, "33 lbs | reps not logged"),
        ("Shrugs (DB)", 25, 0, "25 lbs | To failure"),
        ("Pull-Ups (Assisted)", 20, 0, "20 lbs assist | To failure"),
        ("Cable X Front Crosses", 6, 0, "6 down | reps not logged"),
        ("Through the Legs Cable Bicep Curls", 30, 0, "30 lbs | reps not logged"),
    ]),
    *_day("legs", [
        ("Barbell Squats", 135, 0, "~135 lbs (est.) | reps not logged"),
        ("Trap Bar Deadlifts", 135, 0, "~135 lbs (est.) | reps not logged"),
        ("Kettlebell Lunges", 35, 30, "35 lbs each | 30 reps (15 each side)"),
        ("Calf Extensions", 100, 0, "~100 lbs (est.) | reps not logged"),
        ("Leg Press", 180, 0, "~180 lbs (est.) | reps not logged"),
        ("Hip Thrusts", 95, 0, "~95 lbs (est.) | reps not logged"),
    ]),
    *_day("legs2", [
        ("Leg Press", 180, 0, "~180 lbs (est.) | reps not logged"),
        ("Barbell Squats", 135, 0, "~135 lbs (est.) | reps not logged"),
        ("Kettlebell Lunges", 35, 30, "35 lbs each | 30 reps (15 each side)"),
        ("Calf Extensions", 100, 0, "~100 lbs (est.) | reps not logged"),
        ("Quad Extensions", 100, 10, "100 lbs | 10 reps (slow downs)"),
        ("Hamstring Curls", 70, 0, "~70 lbs (est.) | reps not logged"),
    ]),
]

SEED_TABS: list[dict] = [
    {"tab_key": "home", "label": "Home", "route": "/", "order": 0},
    {"tab_key": "workouts", "label": "Workouts", "route": "/chest", "order": 1},
    {"tab_key": "weight", "label": "Weight", "route": "/weight", "order": 2},
    {"tab_key": "blood", "label": "Blood", "route": "/blood", "order": 3},
    {"tab_key": "photos", "label": "Photos", "route": "/photos", "order": 4},
]

SEED_SHORTCUTS: list[dict] = [
    {"shortcut_key": "steps", "label": "Steps", "route": "/steps", "order": 0},
    {"shortcut_key": "cardio", "label": "Cardio", "route": "/cardio", "order": 1},
    {"shortcut_key": "thoughts", "label": "Thoughts", "route": "/thoughts", "order": 2},
    {"shortcut_key": "supplements", "label": "Supplements", "route": "/supplements", "order": 3},
    {"shortcut_key": "affirmations", "label": "Affirmations", "route": "/affirmations", "order": 4},
]

SEED_QUOTES: list[dict] = [
    {"text": "The only bad workout is the one that didn't happen.",
     "author": "Unknown", "category": "fitness"},
    {"text": "Discipline is choosing between what you want now and what you want most.",
     "author": "Abraham Lincoln", "category": "mindset"},
    {"text": "Success is the sum of small efforts, repeated day in and day out.",
     "author": "Robert Collier", "category": "success"},
]


async def _seed_if_empty(storage: Storage, resource, rows: list[dict]) -> int:
    if await storage.select(resource, limit=1):
        return 0
    for row in rows:
        await storage.create(resource, resource.validate_insert(row))
    return len(rows)


async def seed_demo_data(storage: Storage) -> dict[str, int]:
    """Populate empty tables with starter rows. Tables with data are left alone.

    Returns:
        Rows inserted per resource name.
    """
    counts = {}
    for resource, rows in (
        (EXERCISES, SEED_EXERCISES),
        (TAB_SETTINGS, SEED_TABS),
        (SHORTCUT_SETTINGS, SEED_SHORTCUTS),
        (QUOTES, SEED_QUOTES),
    ):
        counts[resource.name] = await _seed_if_empty(storage, resource, rows)
    if any(counts.values()):
        logger.info("Seeded demo data: %s", counts)
    return counts
