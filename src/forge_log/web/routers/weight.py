"""Weight and body-composition routes, with audit side effects."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from ...db import Storage
from ...errors import NotFoundError
from ...models import BODY_MEASUREMENTS, WEIGHT_ENTRIES, to_json
from ...parsers import write_renpho_csv
from ...services import AuditService, import_weights
from ..crud import add_crud_routes
from ..dependencies import dump, get_storage, parse_bound, read_import_body, require

router = APIRouter(prefix="/api/weight-entries", tags=["weight-entries"])
measurements_router = APIRouter(prefix="/api/body-measurements", tags=["body-measurements"])


@router.post("", status_code=201)
async def create_weight_entry(
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    entry = await storage.create(WEIGHT_ENTRIES, WEIGHT_ENTRIES.validate_insert(payload))
    await AuditService(storage).weight_created(entry)
    return to_json(entry)


@router.get("/range")
async def weight_entries_in_range(
    startDate: str | None = None,
    endDate: str | None = None,
    storage: Storage = Depends(get_storage),
):
    """Entries between two dates, inclusive."""
    start = parse_bound(startDate, "startDate")
    end = parse_bound(endDate, "endDate", end=True)
    return dump(await storage.weight_entries_in_range(start, end))


@router.post("/import")
async def import_weight_entries(request: Request, storage: Storage = Depends(get_storage)):
    """Import a RENPHO CSV export."""
    body = await read_import_body(request)
    if not isinstance(body, str):
        body = "\n".join(str(line) for line in body)
    return (await import_weights(storage, body)).to_dict()


@router.get("/export")
async def export_weight_entries(storage: Storage = Depends(get_storage)):
    """All entries as a RENPHO-format CSV."""
    csv_text = write_renpho_csv(await storage.list_all(WEIGHT_ENTRIES))
    return PlainTextResponse(
        csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="renpho_health_data.csv"'},
    )


@router.patch("/{entry_id}")
async def update_weight_entry(
    entry_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    changes = WEIGHT_ENTRIES.validate_update(payload)
    previous = await require(storage, WEIGHT_ENTRIES, entry_id)
    updated = await storage.update(WEIGHT_ENTRIES, entry_id, changes)
    if updated is None:
        raise NotFoundError(WEIGHT_ENTRIES.label)
    await AuditService(storage).weight_updated(previous, updated)
    return to_json(updated)


@router.delete("/{entry_id}", status_code=204)
async def delete_weight_entry(entry_id: str, storage: Storage = Depends(get_storage)):
    previous = await require(storage, WEIGHT_ENTRIES, entry_id)
    if not await storage.delete(WEIGHT_ENTRIES, entry_id):
        raise NotFoundError(WEIGHT_ENTRIES.label)
    await AuditService(storage).weight_deleted(previous)
    return Response(status_code=204)


add_crud_routes(router, WEIGHT_ENTRIES, create=False, update=False, delete=False)


@measurements_router.get("/latest")
async def latest_body_measurement(storage: Storage = Depends(get_storage)):
    rows = await storage.select(BODY_MEASUREMENTS, limit=1)
    return to_json(rows[0]) if rows else None


add_crud_routes(measurements_router, BODY_MEASUREMENTS)
