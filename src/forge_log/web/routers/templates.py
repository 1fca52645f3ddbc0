"""Exercise template routes. Template names are unique, ignoring case."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...db import Storage
from ...errors import BadRequestError, ConflictError, NotFoundError
from ...models import EXERCISE_TEMPLATES, to_json
from ..crud import add_crud_routes
from ..dependencies import get_storage
from ..schemas import TemplateName

router = APIRouter(prefix="/api/exercise-templates", tags=["exercise-templates"])


async def _ensure_unique(storage: Storage, name: str, record_id: str | None = None) -> None:
    existing = await storage.exercise_template_by_name(name)
    if existing is not None and existing["id"] != record_id:
        raise ConflictError("Exercise template with this name already exists")


@router.post("/get-or-create")
async def get_or_create_template(
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Return the template with this name, creating it on first use."""
    name = TemplateName.model_validate(payload).name.strip()
    if not name:
        raise BadRequestError("Exercise name cannot be empty")
    return to_json(await storage.get_or_create_exercise_template(name))


@router.post("", status_code=201)
async def create_template(
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    data = EXERCISE_TEMPLATES.validate_insert(payload)
    await _ensure_unique(storage, data["name"])
    return to_json(await storage.create(EXERCISE_TEMPLATES, data))


@router.patch("/{template_id}")
async def update_template(
    template_id: str,
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    changes = EXERCISE_TEMPLATES.validate_update(payload)
    if changes.get("name"):
        await _ensure_unique(storage, changes["name"], template_id)
    updated = await storage.update(EXERCISE_TEMPLATES, template_id, changes)
    if updated is None:
        raise NotFoundError(EXERCISE_TEMPLATES.label)
    return to_json(updated)


add_crud_routes(router, EXERCISE_TEMPLATES, create=False, update=False)
