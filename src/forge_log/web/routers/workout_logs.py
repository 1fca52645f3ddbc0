"""Workout completion log routes."""

from fastapi import APIRouter, Depends

from ...db import Storage
from ...models import WORKOUT_LOGS, to_json
from ...utils.metrics import next_workout_category
from ..crud import add_crud_routes
from ..dependencies import get_storage

router = APIRouter(prefix="/api/workout-logs", tags=["workout-logs"])


@router.get("/latest")
async def latest_workout_log(storage: Storage = Depends(get_storage)):
    """Most recently completed workout, or null."""
    return to_json(await storage.latest_workout_log())


@router.get("/next")
async def next_workout(storage: Storage = Depends(get_storage)):
    """Suggest the next training day from the last completed one."""
    latest = await storage.latest_workout_log()
    last_category = latest["category"] if latest else None
    return {
        "lastCategory": last_category,
        "nextCategory": next_workout_category(last_category),
    }


# Logs are append-only.
add_crud_routes(router, WORKOUT_LOGS, get_one=False, update=False, delete=False)
