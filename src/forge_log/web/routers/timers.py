"""Persisted workout stopwatch state and lap times, addressed by storage key."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from ...db import Storage
from ...errors import NotFoundError
from ...models import TIMER_LAP_TIMES, WORKOUT_TIMERS, to_json
from ..dependencies import dump, get_storage

router = APIRouter(prefix="/api/timers", tags=["timers"])


async def _require_timer(storage: Storage, storage_key: str) -> dict:
    timer = await storage.get_timer(storage_key)
    if timer is None:
        raise NotFoundError(WORKOUT_TIMERS.label)
    return timer


@router.get("/{storage_key}/laps")
async def list_laps(storage_key: str, storage: Storage = Depends(get_storage)):
    timer = await _require_timer(storage, storage_key)
    return dump(await storage.timer_laps(timer["id"]))


@router.post("/{storage_key}/laps", status_code=201)
async def add_lap(
    storage_key: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    timer = await _require_timer(storage, storage_key)
    data = TIMER_LAP_TIMES.validate_insert({**payload, "timerId": timer["id"]})
    return to_json(await storage.add_timer_lap(timer["id"], data))


@router.delete("/{storage_key}/laps", status_code=204)
async def clear_laps(storage_key: str, storage: Storage = Depends(get_storage)):
    timer = await _require_timer(storage, storage_key)
    await storage.clear_timer_laps(timer["id"])
    return Response(status_code=204)


@router.get("/{storage_key}")
async def get_timer(storage_key: str, storage: Storage = Depends(get_storage)):
    """Timer state with its laps under ``lapTimes``."""
    timer = await _require_timer(storage, storage_key)
    laps = await storage.timer_laps(timer["id"])
    return {**to_json(timer), "lapTimes": dump(laps)}


@router.put("/{storage_key}")
async def save_timer(
    storage_key: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Create or fully replace the timer state for this key."""
    data = WORKOUT_TIMERS.validate_insert({**payload, "storageKey": storage_key})
    return to_json(await storage.save_timer(storage_key, data))


@router.delete("/{storage_key}", status_code=204)
async def delete_timer(storage_key: str, storage: Storage = Depends(get_storage)):
    if not await storage.delete_timer(storage_key):
        raise NotFoundError(WORKOUT_TIMERS.label)
    return Response(status_code=204)
