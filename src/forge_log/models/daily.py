"""Per-day workout tracking: set taps, completion flags, notes and timers.

Rows are keyed by a ``YYYY-MM-DD`` day string in the service's configured
timezone, so "today" rolls over at local midnight rather than UTC midnight.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from .base import CamelModel, Resource
from .workouts import Category

# Sets a single tap-to-track exercise can record in one day.
MAX_DAILY_SETS = 3

DAY_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class DailySetProgress(CamelModel):
    """Sets completed today for one exercise."""

    exercise_id: str = Field(min_length=1)
    date: str = Field(pattern=DAY_PATTERN)
    sets_completed: int = Field(default=0, ge=0, le=MAX_DAILY_SETS)


class DailyWorkoutStatus(CamelModel):
    """Whether a workout day was marked done today."""

    category: Category
    date: str = Field(pattern=DAY_PATTERN)
    is_completed: int = Field(default=0, ge=0, le=1)


class WorkoutNote(CamelModel):
    """Free-text notes for one workout day on one date."""

    category: Category
    date: str = Field(pattern=DAY_PATTERN)
    notes: str = ""


class ExerciseTemplate(CamelModel):
    """A reusable exercise name offered when building workout days."""

    name: Annotated[str, BeforeValidator(_strip)] = Field(min_length=1)


class WorkoutTimer(CamelModel):
    """Persisted stopwatch state, addressed by the client's storage key."""

    storage_key: str = Field(min_length=1)
    is_running: int = Field(default=0, ge=0, le=1)
    session_start_epoch_ms: int = 0
    lap_start_epoch_ms: int = 0
    elapsed_before_start_ms: int = 0
    lap_elapsed_before_start_ms: int = 0
    date_key: str = ""
    auto_reset_daily: int = Field(default=1, ge=0, le=1)


class TimerLapTime(CamelModel):
    """One recorded lap of a workout timer."""

    timer_id: str = Field(min_length=1)
    lap_id: int = Field(ge=0)
    lap_time: str = Field(min_length=1)
    lap_time_ms: int = Field(ge=0)
    started_at_ms: int = 0


DAILY_SET_PROGRESS = Resource(
    name="daily_set_progress",
    label="Daily set progress",
    table="daily_set_progress",
    model=DailySetProgress,
    server_fields=("updated_at",),
)

DAILY_WORKOUT_STATUS = Resource(
    name="daily_workout_status",
    label="Daily workout status",
    table="daily_workout_status",
    model=DailyWorkoutStatus,
    server_fields=("updated_at",),
)

WORKOUT_NOTES = Resource(
    name="workout_notes",
    label="Workout notes",
    table="workout_notes",
    model=WorkoutNote,
    order_by=(("date", True), ("created_at", True)),
    server_fields=("updated_at",),
)

EXERCISE_TEMPLATES = Resource(
    name="exercise_templates",
    label="Exercise template",
    table="exercise_templates",
    model=ExerciseTemplate,
    order_by=(("name", False),),
)

WORKOUT_TIMERS = Resource(
    name="workout_timers",
    label="Timer",
    table="workout_timers",
    model=WorkoutTimer,
    key_field="storage_key",
    server_fields=("updated_at",),
)

TIMER_LAP_TIMES = Resource(
    name="timer_lap_times",
    label="Lap time",
    table="timer_lap_times",
    model=TimerLapTime,
    order_by=(("lap_id", False), ("created_at", False)),
)
