"""Workout-day exercises, completion logs and personal records."""

from enum import Enum

from pydantic import Field

from .base import CamelModel, Resource, Timestamp


class Category(str, Enum):
    """Workout-day tags used to partition exercises and logs."""

    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"
    PUSH2 = "push2"
    PULL2 = "pull2"
    LEGS2 = "legs2"
    CARDIO = "cardio"


# Rotation used to suggest the next training day. Cardio sits outside it.
WORKOUT_ROTATION: list[Category] = [
    Category.PUSH,
    Category.PULL,
    Category.LEGS,
    Category.PUSH2,
    Category.PULL2,
    Category.LEGS2,
]


class Exercise(CamelModel):
    """One exercise slot on a workout day."""

    name: str = Field(min_length=1)
    weight: int = 0
    reps: int = 0
    notes: str = ""
    category: Category
    order: int = 0
    # Cardio-only fields
    duration: str = ""
    distance: str = ""
    pace: str = ""
    calories: int = 0
    rpe: int = 0


class WorkoutLog(CamelModel):
    """A completed workout day."""

    category: Category
    completed_at: Timestamp | None = None


class PersonalRecord(CamelModel):
    """A user-curated best lift or time, independent of logged exercises."""

    exercise: str = Field(min_length=1)
    weight: str = ""
    reps: str = ""
    time: str = ""
    category: str = Field(min_length=1)
    order: int = 0


EXERCISES = Resource(
    name="exercises",
    label="Exercise",
    table="exercises",
    model=Exercise,
    order_by=(("order", False), ("created_at", True)),
)

WORKOUT_LOGS = Resource(
    name="workout_logs",
    label="Workout log",
    table="workout_logs",
    model=WorkoutLog,
    order_by=(("completed_at", True), ("created_at", True)),
    now_fields=("completed_at",),
)

PERSONAL_RECORDS = Resource(
    name="personal_records",
    label="Personal record",
    table="personal_records",
    model=PersonalRecord,
    order_by=(("order", False), ("created_at", False)),
    server_fields=("updated_at",),
)
