"""Progress photo metadata routes."""

from fastapi import APIRouter, Depends

from ...db import Storage
from ...models import PHOTO_PROGRESS
from ..crud import add_crud_routes
from ..dependencies import dump, get_storage

router = APIRouter(prefix="/api/photo-progress", tags=["photo-progress"])


@router.get("/body-part/{body_part}")
async def photos_by_body_part(body_part: str, storage: Storage = Depends(get_storage)):
    return dump(await storage.photos_by_body_part(body_part))


add_crud_routes(router, PHOTO_PROGRESS)
