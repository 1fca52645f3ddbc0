"""Profile, shortcut and tab settings."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from ...db import Storage
from ...errors import NotFoundError
from ...models import SHORTCUT_SETTINGS, TAB_SETTINGS, USER_SETTINGS, Resource, to_json
from ..dependencies import dump, get_storage

user_settings_router = APIRouter(prefix="/api/user-settings", tags=["settings"])


@user_settings_router.get("")
async def get_user_settings(storage: Storage = Depends(get_storage)):
    settings = await storage.get_user_settings()
    if settings is None:
        return {"currentBodyWeight": None}
    return to_json(settings)


@user_settings_router.post("")
async def save_user_settings(
    payload: dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Create the settings row or merge into the existing one."""
    changes = USER_SETTINGS.validate_update(payload)
    return to_json(await storage.upsert_user_settings(changes))


def _keyed_router(prefix: str, resource: Resource) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["settings"])

    @router.get("", name=f"list_{resource.name}")
    async def list_settings(storage: Storage = Depends(get_storage)):
        return dump(await storage.list_all(resource))

    @router.get("/visible", name=f"visible_{resource.name}")
    async def visible_settings(storage: Storage = Depends(get_storage)):
        return dump(await storage.visible_settings(resource))

    @router.patch("/{key}", name=f"update_{resource.name}")
    async def update_setting(
        key: str,
        payload: dict[str, Any] = Body(...),
        storage: Storage = Depends(get_storage),
    ):
        changes = resource.validate_update(payload)
        changes.pop(resource.key_field, None)
        record = await storage.update_by_key(resource, key, changes)
        if record is None:
            raise NotFoundError(resource.label)
        return to_json(record)

    return router


shortcut_settings_router = _keyed_router("/api/shortcut-settings", SHORTCUT_SETTINGS)
tab_settings_router = _keyed_router("/api/tab-settings", TAB_SETTINGS)
