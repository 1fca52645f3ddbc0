"""Step count and cardio session routes."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import PlainTextResponse

from ...db import Storage
from ...errors import BadRequestError
from ...models import CARDIO_LOG_ENTRIES, STEP_ENTRIES, to_json
from ...parsers import parse_cardio_text, write_steps_csv
from ...services import import_steps
from ...utils.metrics import cardio_summary, step_summary
from ..crud import add_crud_routes
from ..dependencies import dump, get_storage, parse_bound, read_import_body, reference_date

steps_router = APIRouter(prefix="/api/step-entries", tags=["step-entries"])
cardio_router = APIRouter(prefix="/api/cardio-log-entries", tags=["cardio-log-entries"])


@steps_router.get("/latest")
async def latest_step_entry(storage: Storage = Depends(get_storage)):
    return to_json(await storage.latest_step_entry())


@steps_router.get("/range")
async def step_entries_in_range(
    startDate: str | None = None,
    endDate: str | None = None,
    storage: Storage = Depends(get_storage),
):
    start = parse_bound(startDate, "startDate")
    end = parse_bound(endDate, "endDate", end=True)
    return dump(await storage.step_entries_in_range(start, end))


@steps_router.get("/summary")
async def steps_summary(date: str | None = None, storage: Storage = Depends(get_storage)):
    """Week, month and year totals ending on ``date`` (default today)."""
    return step_summary(await storage.list_all(STEP_ENTRIES), reference_date(date))


@steps_router.post("/import")
async def import_step_entries(request: Request, storage: Storage = Depends(get_storage)):
    body = await read_import_body(request)
    if not isinstance(body, str):
        body = "\n".join(str(line) for line in body)
    return (await import_steps(storage, body)).to_dict()


@steps_router.get("/export")
async def export_step_entries(storage: Storage = Depends(get_storage)):
    csv_text = write_steps_csv(await storage.list_all(STEP_ENTRIES))
    return PlainTextResponse(
        csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="steps.csv"'},
    )


add_crud_routes(steps_router, STEP_ENTRIES)


@cardio_router.get("/summary")
async def cardio_log_summary(date: str | None = None, storage: Storage = Depends(get_storage)):
    return cardio_summary(await storage.list_all(CARDIO_LOG_ENTRIES), reference_date(date))


@cardio_router.post("/parse-voice")
async def parse_voice(payload: dict[str, Any] = Body(...)):
    """Turn a spoken description into a draft entry. Nothing is saved."""
    text = payload.get("text") or payload.get("transcript")
    if not isinstance(text, str) or not text.strip():
        raise BadRequestError("text is required")
    return parse_cardio_text(text)


add_crud_routes(cardio_router, CARDIO_LOG_ENTRIES)
