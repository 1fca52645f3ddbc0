"""Quotes, affirmations, thoughts and supplements."""

import random
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request
from pydantic import ValidationError

from ...db import Storage
from ...errors import BadRequestError, NotFoundError
from ...models import (
    AFFIRMATIONS,
    MAX_ACTIVE_AFFIRMATIONS,
    QUOTES,
    SUPPLEMENTS,
    THOUGHTS,
    to_json,
)
from ...parsers.base import format_validation_error
from ...services import ImportResult, import_affirmations, import_quotes
from ..crud import add_crud_routes
from ..dependencies import dump, get_storage, read_import_body

quotes_router = APIRouter(prefix="/api/quotes", tags=["quotes"])
affirmations_router = APIRouter(prefix="/api/affirmations", tags=["affirmations"])
thoughts_router = APIRouter(prefix="/api/thoughts", tags=["thoughts"])
supplements_router = APIRouter(prefix="/api/supplements", tags=["supplements"])

IMPORT_MODES = ("replace", "append")


# Quotes


@quotes_router.get("/active")
async def active_quotes(storage: Storage = Depends(get_storage)):
    return dump(await storage.active_quotes())


@quotes_router.get("/random")
async def random_quote(storage: Storage = Depends(get_storage)):
    """A random active quote; 404 when none is active."""
    quote = await storage.random_active_quote()
    if quote is None:
        raise NotFoundError("Active quote")
    return to_json(quote)


@quotes_router.post("/bulk-import")
async def bulk_import_quotes(
    request: Request,
    mode: str = Query("replace"),
    storage: Storage = Depends(get_storage),
):
    """Import quotes from pasted text or a JSON array.

    ``mode=replace`` (the default) clears existing quotes first;
    ``mode=append`` keeps them.
    """
    if mode not in IMPORT_MODES:
        raise BadRequestError(f"mode must be one of: {', '.join(IMPORT_MODES)}")
    body = await read_import_body(request, list_key="quotes")
    result = await import_quotes(storage, body, append=mode == "append")
    return result.to_dict()


add_crud_routes(quotes_router, QUOTES)


# Affirmations


@affirmations_router.get("/active")
async def active_affirmations(storage: Storage = Depends(get_storage)):
    return dump(await storage.active_affirmations())


@affirmations_router.post("/bulk")
async def bulk_affirmations(request: Request, storage: Storage = Depends(get_storage)):
    """Append affirmations, one per line or as a JSON array."""
    body = await read_import_body(request, list_key="affirmations")
    return (await import_affirmations(storage, body)).to_dict()


@affirmations_router.post("/shuffle")
async def shuffle_affirmations(storage: Storage = Depends(get_storage)):
    """Activate a fresh random set of affirmations and deactivate the rest."""
    everything = await storage.list_all(AFFIRMATIONS)
    chosen = {
        a["id"] for a in random.sample(everything, min(MAX_ACTIVE_AFFIRMATIONS, len(everything)))
    }
    for affirmation in everything:
        wanted = 1 if affirmation["id"] in chosen else 0
        if affirmation["is_active"] != wanted:
            await storage.update(AFFIRMATIONS, affirmation["id"], {"is_active": wanted})
    return dump(await storage.active_affirmations())


add_crud_routes(affirmations_router, AFFIRMATIONS)


# Thoughts

add_crud_routes(thoughts_router, THOUGHTS)


# Supplements


@supplements_router.post("/bulk")
async def bulk_supplements(
    payload: list[dict[str, Any]] = Body(...),
    storage: Storage = Depends(get_storage),
):
    """Create several supplements; invalid items are reported, not stored."""
    result = ImportResult()
    for number, item in enumerate(payload, start=1):
        try:
            data = SUPPLEMENTS.validate_insert(item)
        except ValidationError as e:
            result.failed += 1
            result.errors.append(f"Item {number}: {format_validation_error(e)}")
            continue
        await storage.create(SUPPLEMENTS, data)
        result.imported += 1
    return result.to_dict()


add_crud_routes(supplements_router, SUPPLEMENTS)
