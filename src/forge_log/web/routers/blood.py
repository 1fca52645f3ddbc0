"""Blood panel and optimal-range routes."""

import json
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response

from ...db import Storage
from ...errors import NotFoundError
from ...models import BLOOD_ENTRIES, BLOOD_OPTIMAL_RANGES, Attachment, to_camel, to_json
from ...services import import_blood
from ...utils.metrics import blood_deltas
from ..crud import add_crud_routes
from ..dependencies import dump, get_storage, read_import_body, require
from ..schemas import AttachmentRef

router = APIRouter(prefix="/api/blood-entries", tags=["blood"])
ranges_router = APIRouter(prefix="/api/blood-optimal-ranges", tags=["blood"])


@router.post("/import")
async def import_blood_entries(request: Request, storage: Storage = Depends(get_storage)):
    """Import panels from long-format CSV, the wide template or a JSON array."""
    body = await read_import_body(request, list_key="entries")
    if isinstance(body, list):
        body = json.dumps(body)
    return (await import_blood(storage, body)).to_dict()


@router.post("/{entry_id}/attachments")
async def add_attachment(
    entry_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    attachment = Attachment.model_validate(payload)
    entry = await require(storage, BLOOD_ENTRIES, entry_id)
    files = list(entry.get("attached_files") or [])
    files.append(attachment.model_dump(by_alias=True))
    updated = await storage.update(BLOOD_ENTRIES, entry_id, {"attached_files": files})
    return to_json(updated)


@router.delete("/{entry_id}/attachments")
async def remove_attachment(
    entry_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    ref = AttachmentRef.model_validate(payload)
    entry = await require(storage, BLOOD_ENTRIES, entry_id)
    files = [
        f for f in (entry.get("attached_files") or []) if f.get("fileUrl") != ref.file_url
    ]
    updated = await storage.update(BLOOD_ENTRIES, entry_id, {"attached_files": files})
    return to_json(updated)


@router.get("/{entry_id}/comparison")
async def compare_entry(entry_id: str, storage: Storage = Depends(get_storage)):
    """Marker changes against the panel taken just before this one."""
    entries = await storage.list_all(BLOOD_ENTRIES)
    for position, entry in enumerate(entries):
        if entry["id"] == entry_id:
            previous = entries[position + 1] if position + 1 < len(entries) else None
            return {
                "entry": to_json(entry),
                "previous": to_json(previous),
                "deltas": {
                    to_camel(key): delta
                    for key, delta in blood_deltas(entry, previous).items()
                },
            }
    raise NotFoundError(BLOOD_ENTRIES.label)


add_crud_routes(router, BLOOD_ENTRIES)


@ranges_router.get("")
async def list_optimal_ranges(storage: Storage = Depends(get_storage)):
    return dump(await storage.list_all(BLOOD_OPTIMAL_RANGES))


@ranges_router.get("/{marker_key}")
async def get_optimal_range(marker_key: str, storage: Storage = Depends(get_storage)):
    record = await storage.get_by_key(BLOOD_OPTIMAL_RANGES, marker_key)
    if record is None:
        raise NotFoundError(BLOOD_OPTIMAL_RANGES.label)
    return to_json(record)


@ranges_router.put("/{marker_key}")
async def put_optimal_range(
    marker_key: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Create or replace the range for a marker."""
    body = {k: v for k, v in payload.items() if k not in ("markerKey", "marker_key")}
    data = BLOOD_OPTIMAL_RANGES.validate_insert({**body, "markerKey": marker_key})
    record = await storage.upsert_by_key(BLOOD_OPTIMAL_RANGES, marker_key, data)
    return to_json(record)


@ranges_router.delete("/{marker_key}", status_code=204)
async def delete_optimal_range(marker_key: str, storage: Storage = Depends(get_storage)):
    record = await storage.get_by_key(BLOOD_OPTIMAL_RANGES, marker_key)
    if record is None or not await storage.delete(BLOOD_OPTIMAL_RANGES, record["id"]):
        raise NotFoundError(BLOOD_OPTIMAL_RANGES.label)
    return Response(status_code=204)
