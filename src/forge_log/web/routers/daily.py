"""Tap-to-track set progress, workout completion flags and notes for today."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...db import Storage
from ...errors import BadRequestError
from ...models import EXERCISES, to_json
from ..dependencies import check_category, dump, get_storage, get_today, require
from ..schemas import SetCountUpdate

set_progress_router = APIRouter(prefix="/api/daily-set-progress", tags=["daily"])
workout_status_router = APIRouter(prefix="/api/daily-workout-status", tags=["daily"])
notes_router = APIRouter(prefix="/api/workout-notes", tags=["daily"])


@set_progress_router.post("/reset")
async def reset_set_progress(storage: Storage = Depends(get_storage)):
    cleared = await storage.reset_daily_set_progress()
    return {"message": "Daily set progress reset successfully", "cleared": cleared}


@set_progress_router.post("/tap/{exercise_id}")
async def tap_set(
    exercise_id: str,
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    """Record one more completed set for today, up to the daily maximum."""
    await require(storage, EXERCISES, exercise_id)
    return to_json(await storage.tap_daily_set(exercise_id, today))


@set_progress_router.get("/{category}")
async def set_progress_for_day(
    category: str,
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    check_category(category)
    return dump(await storage.daily_set_progress(category, today))


@set_progress_router.patch("/{exercise_id}")
async def set_set_count(
    exercise_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    """Overwrite today's count; values outside 0..3 are clamped."""
    update = SetCountUpdate.model_validate(payload)
    await require(storage, EXERCISES, exercise_id)
    record = await storage.set_daily_sets(exercise_id, today, update.sets_completed)
    return to_json(record)


@workout_status_router.post("/reset")
async def reset_workout_status(storage: Storage = Depends(get_storage)):
    cleared = await storage.reset_daily_workout_status()
    return {"message": "Daily workout status reset successfully", "cleared": cleared}


@workout_status_router.get("/{category}")
async def workout_status(
    category: str,
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    check_category(category)
    status = await storage.get_daily_workout_status(category, today)
    return {"isCompleted": bool(status and status["is_completed"])}


@workout_status_router.post("/{category}")
async def set_workout_status(
    category: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    check_category(category)
    completed = payload.get("isCompleted")
    if not isinstance(completed, bool):
        raise BadRequestError("isCompleted must be a boolean")
    status = await storage.set_daily_workout_status(category, today, completed)
    return {"isCompleted": status["is_completed"] == 1}


@notes_router.get("/{category}")
async def workout_notes(
    category: str,
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    check_category(category)
    note = await storage.get_workout_note(category, today)
    return {"notes": note["notes"] if note else ""}


@notes_router.post("/{category}")
async def save_workout_notes(
    category: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
    today: str = Depends(get_today),
):
    check_category(category)
    notes = payload.get("notes")
    if not isinstance(notes, str):
        raise BadRequestError("Notes must be a string")
    note = await storage.save_workout_note(category, today, notes)
    return {"notes": note["notes"]}
