"""Read-only audit ledger routes."""

from fastapi import APIRouter, Depends, Query

from ...db import Storage
from ...models import CHANGES_AUDIT, PR_CHANGES_AUDIT, WEIGHT_AUDIT, Resource
from ..dependencies import dump, get_storage


def _ledger_router(prefix: str, resource: Resource) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["audit"])

    @router.get("", name=f"list_{resource.name}")
    async def list_ledger(
        limit: int | None = Query(None, ge=1),
        storage: Storage = Depends(get_storage),
    ):
        """Newest rows first."""
        return dump(await storage.select(resource, limit=limit))

    return router


weight_audit_router = _ledger_router("/api/weight-audit", WEIGHT_AUDIT)
changes_audit_router = _ledger_router("/api/changes-audit", CHANGES_AUDIT)
pr_changes_audit_router = _ledger_router("/api/pr-changes-audit", PR_CHANGES_AUDIT)
