"""Entity models for forge-log."""

from .audit import (
    CHANGES_AUDIT,
    PR_CHANGES_AUDIT,
    WEIGHT_AUDIT,
    AuditAction,
    AuditSource,
    ChangesAudit,
    PRChangesAudit,
    WeightAudit,
)
from .base import CamelModel, Resource, Timestamp, parse_timestamp, to_camel, to_json
from .blood import (
    BLOOD_ENTRIES,
    BLOOD_MARKERS,
    BLOOD_MARKERS_BY_KEY,
    BLOOD_OPTIMAL_RANGES,
    BLOOD_RATIOS,
    Attachment,
    BloodEntry,
    BloodMarker,
    BloodOptimalRange,
)
from .body import (
    BODY_MEASUREMENTS,
    CARDIO_LOG_ENTRIES,
    PHOTO_PROGRESS,
    STEP_ENTRIES,
    WEIGHT_ENTRIES,
    BodyMeasurement,
    CardioLogEntry,
    PhotoProgress,
    StepEntry,
    WeightEntry,
)
from .daily import (
    DAILY_SET_PROGRESS,
    DAILY_WORKOUT_STATUS,
    EXERCISE_TEMPLATES,
    MAX_DAILY_SETS,
    TIMER_LAP_TIMES,
    WORKOUT_NOTES,
    WORKOUT_TIMERS,
    DailySetProgress,
    DailyWorkoutStatus,
    ExerciseTemplate,
    TimerLapTime,
    WorkoutNote,
    WorkoutTimer,
)
from .journal import (
    AFFIRMATIONS,
    MAX_ACTIVE_AFFIRMATIONS,
    QUOTES,
    SUPPLEMENTS,
    THOUGHTS,
    Affirmation,
    Quote,
    Supplement,
    Thought,
)
from .settings import (
    SHORTCUT_SETTINGS,
    TAB_SETTINGS,
    USER_SETTINGS,
    ShortcutSettings,
    TabSettings,
    UserSettings,
)
from .workouts import (
    EXERCISES,
    PERSONAL_RECORDS,
    WORKOUT_LOGS,
    WORKOUT_ROTATION,
    Category,
    Exercise,
    PersonalRecord,
    WorkoutLog,
)

# Every persisted entity type, in schema-creation order.
RESOURCES: list[Resource] = [
    EXERCISES,
    WORKOUT_LOGS,
    DAILY_SET_PROGRESS,
    DAILY_WORKOUT_STATUS,
    WORKOUT_NOTES,
    EXERCISE_TEMPLATES,
    WORKOUT_TIMERS,
    TIMER_LAP_TIMES,
    PERSONAL_RECORDS,
    WEIGHT_ENTRIES,
    BODY_MEASUREMENTS,
    STEP_ENTRIES,
    CARDIO_LOG_ENTRIES,
    PHOTO_PROGRESS,
    BLOOD_ENTRIES,
    BLOOD_OPTIMAL_RANGES,
    QUOTES,
    AFFIRMATIONS,
    THOUGHTS,
    SUPPLEMENTS,
    USER_SETTINGS,
    SHORTCUT_SETTINGS,
    TAB_SETTINGS,
    WEIGHT_AUDIT,
    CHANGES_AUDIT,
    PR_CHANGES_AUDIT,
]

RESOURCES_BY_NAME: dict[str, Resource] = {r.name: r for r in RESOURCES}

__all__ = [
    "AFFIRMATIONS",
    "Affirmation",
    "Attachment",
    "AuditAction",
    "AuditSource",
    "BLOOD_ENTRIES",
    "BLOOD_MARKERS",
    "BLOOD_MARKERS_BY_KEY",
    "BLOOD_OPTIMAL_RANGES",
    "BLOOD_RATIOS",
    "BODY_MEASUREMENTS",
    "BloodEntry",
    "BloodMarker",
    "BloodOptimalRange",
    "BodyMeasurement",
    "CARDIO_LOG_ENTRIES",
    "CHANGES_AUDIT",
    "CamelModel",
    "DAILY_SET_PROGRESS",
    "DAILY_WORKOUT_STATUS",
    "DailySetProgress",
    "DailyWorkoutStatus",
    "EXERCISE_TEMPLATES",
    "ExerciseTemplate",
    "MAX_DAILY_SETS",
    "TIMER_LAP_TIMES",
    "TimerLapTime",
    "WORKOUT_NOTES",
    "WORKOUT_TIMERS",
    "WorkoutNote",
    "WorkoutTimer",
    "CardioLogEntry",
    "Category",
    "ChangesAudit",
    "EXERCISES",
    "Exercise",
    "MAX_ACTIVE_AFFIRMATIONS",
    "PERSONAL_RECORDS",
    "PHOTO_PROGRESS",
    "PRChangesAudit",
    "PR_CHANGES_AUDIT",
    "PersonalRecord",
    "PhotoProgress",
    "QUOTES",
    "Quote",
    "RESOURCES",
    "RESOURCES_BY_NAME",
    "Resource",
    "SHORTCUT_SETTINGS",
    "STEP_ENTRIES",
    "SUPPLEMENTS",
    "ShortcutSettings",
    "StepEntry",
    "Supplement",
    "TAB_SETTINGS",
    "THOUGHTS",
    "TabSettings",
    "Thought",
    "Timestamp",
    "USER_SETTINGS",
    "UserSettings",
    "WEIGHT_AUDIT",
    "WEIGHT_ENTRIES",
    "WORKOUT_LOGS",
    "WORKOUT_ROTATION",
    "WeightAudit",
    "WeightEntry",
    "WorkoutLog",
    "parse_timestamp",
    "to_camel",
    "to_json",
]
