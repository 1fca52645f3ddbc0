"""API routers, one module per area."""

from . import (
    activity,
    audit,
    blood,
    daily,
    exercises,
    journal,
    photos,
    records,
    settings,
    templates,
    timers,
    weight,
    workout_logs,
)

ROUTERS = [
    exercises.router,
    workout_logs.router,
    daily.set_progress_router,
    daily.workout_status_router,
    daily.notes_router,
    templates.router,
    timers.router,
    weight.router,
    weight.measurements_router,
    audit.weight_audit_router,
    audit.changes_audit_router,
    audit.pr_changes_audit_router,
    blood.router,
    blood.ranges_router,
    photos.router,
    journal.quotes_router,
    journal.affirmations_router,
    journal.thoughts_router,
    journal.supplements_router,
    records.router,
    activity.steps_router,
    activity.cardio_router,
    settings.user_settings_router,
    settings.shortcut_settings_router,
    settings.tab_settings_router,
]

__all__ = ["ROUTERS"]
