"""Standard list/get/create/update/delete routes for a resource.

Routers register their special-purpose paths first and call
:func:`add_crud_routes` last, so fixed paths such as ``/active`` are matched
before ``/{record_id}``.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from ..db import Storage
from ..errors import NotFoundError
from ..models import Resource, to_json
from .dependencies import dump, get_storage, require


def add_crud_routes(
    router: APIRouter,
    resource: Resource,
    *,
    list_all: bool = True,
    get_one: bool = True,
    create: bool = True,
    update: bool = True,
    delete: bool = True,
) -> None:
    """Attach the standard routes for ``resource`` to ``router``."""

    if list_all:

        @router.get("", name=f"list_{resource.name}")
        async def list_records(storage: Storage = Depends(get_storage)):
            return dump(await storage.list_all(resource))

    if create:

        @router.post("", status_code=201, name=f"create_{resource.name}")
        async def create_record(
            payload: dict[str, Any] = Body(...),
            storage: Storage = Depends(get_storage),
        ):
            record = await storage.create(resource, resource.validate_insert(payload))
            return to_json(record)

    if get_one:

        @router.get("/{record_id}", name=f"get_{resource.name}")
        async def get_record(record_id: str, storage: Storage = Depends(get_storage)):
            return to_json(await require(storage, resource, record_id))

    if update:

        @router.patch("/{record_id}", name=f"update_{resource.name}")
        async def update_record(
            record_id: str,
            payload: dict[str, Any] = Body(...),
            storage: Storage = Depends(get_storage),
        ):
            changes = resource.validate_update(payload)
            record = await storage.update(resource, record_id, changes)
            if record is None:
                raise NotFoundError(resource.label)
            return to_json(record)

    if delete:

        @router.delete("/{record_id}", status_code=204, name=f"delete_{resource.name}")
        async def delete_record(record_id: str, storage: Storage = Depends(get_storage)):
            if not await storage.delete(resource, record_id):
                raise NotFoundError(resource.label)
            return Response(status_code=204)
