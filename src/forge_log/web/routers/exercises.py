"""Workout exercise routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from pydantic import TypeAdapter

from ...db import Storage
from ...errors import NotFoundError
from ...models import EXERCISES, to_json
from ...services import AuditService, import_workouts
from ..crud import add_crud_routes
from ..dependencies import (
    check_category,
    dump,
    get_storage,
    read_import_body,
    require,
)
from ..schemas import ReorderItem

router = APIRouter(prefix="/api/exercises", tags=["exercises"])

REORDER_ADAPTER = TypeAdapter(list[ReorderItem])


@router.put("/reorder")
async def reorder_exercises(
    payload: list[dict[str, Any]] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Assign explicit order values to exercises."""
    items = REORDER_ADAPTER.validate_python(payload)
    updated = await storage.reorder(EXERCISES, [(i.id, i.order) for i in items])
    return {"message": "Exercises reordered successfully", "updated": updated}


@router.post("/import/{category}")
async def import_exercises(
    category: str, request: Request, storage: Storage = Depends(get_storage)
):
    """Replace a workout day from ``ORDER|TITLE|WEIGHT|REPS|NOTES`` rows."""
    check_category(category)
    body = await read_import_body(request)
    if not isinstance(body, str):
        body = "\n".join(str(line) for line in body)
    result = await import_workouts(storage, body, category)
    return result.to_dict()


@router.get("/{category}")
async def exercises_by_category(category: str, storage: Storage = Depends(get_storage)):
    """Exercises for one workout day."""
    check_category(category)
    return dump(await storage.exercises_by_category(category))


@router.patch("/{exercise_id}")
async def update_exercise(
    exercise_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Update an exercise; weight changes go to the changes audit."""
    changes = EXERCISES.validate_update(payload)
    previous = await require(storage, EXERCISES, exercise_id)
    updated = await storage.update(EXERCISES, exercise_id, changes)
    if updated is None:
        raise NotFoundError(EXERCISES.label)
    await AuditService(storage).exercise_updated(previous, updated)
    return to_json(updated)


add_crud_routes(router, EXERCISES, get_one=False, update=False)
