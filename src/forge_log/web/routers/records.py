"""Personal record routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends
from pydantic import TypeAdapter

from ...db import Storage
from ...errors import NotFoundError
from ...models import PERSONAL_RECORDS, to_json
from ...services import AuditService
from ...utils.metrics import bodyweight_percentage
from ..crud import add_crud_routes
from ..dependencies import get_storage, require
from ..schemas import ReorderItem

router = APIRouter(prefix="/api/personal-records", tags=["personal-records"])

REORDER_ADAPTER = TypeAdapter(list[ReorderItem])


@router.post("", status_code=201)
async def create_personal_record(
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Create a record at the end of the list unless an order is given."""
    data = PERSONAL_RECORDS.validate_insert(payload)
    if "order" not in payload:
        existing = await storage.list_all(PERSONAL_RECORDS)
        data["order"] = max([r["order"] or 0 for r in existing] + [0]) + 1
    return to_json(await storage.create(PERSONAL_RECORDS, data))


@router.put("/reorder")
async def reorder_personal_records(
    payload: list[dict[str, Any]] = Body(...),
    storage: Storage = Depends(get_storage),
):
    items = REORDER_ADAPTER.validate_python(payload)
    updated = await storage.reorder(PERSONAL_RECORDS, [(i.id, i.order) for i in items])
    return {"message": "Personal records reordered successfully", "updated": updated}


@router.get("/bodyweight-ratios")
async def bodyweight_ratios(
    bodyWeight: float | None = None,
    storage: Storage = Depends(get_storage),
):
    """Each record's weight as a percentage of current body weight."""
    if bodyWeight is None:
        settings = await storage.get_user_settings()
        bodyWeight = settings["current_body_weight"] if settings else None
    records = await storage.list_all(PERSONAL_RECORDS)
    return {
        "bodyWeight": bodyWeight,
        "records": [
            {
                "id": r["id"],
                "exercise": r["exercise"],
                "category": r["category"],
                "weight": r["weight"],
                "bodyWeightPercentage": bodyweight_percentage(r["weight"], bodyWeight),
            }
            for r in records
        ],
    }


@router.patch("/{record_id}")
async def update_personal_record(
    record_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Update a record; changed weight/reps/time values are audited."""
    changes = PERSONAL_RECORDS.validate_update(payload)
    previous = await require(storage, PERSONAL_RECORDS, record_id)
    updated = await storage.update(PERSONAL_RECORDS, record_id, changes)
    if updated is None:
        raise NotFoundError(PERSONAL_RECORDS.label)
    await AuditService(storage).personal_record_updated(previous, updated)
    return to_json(updated)


add_crud_routes(router, PERSONAL_RECORDS, create=False, update=False)
