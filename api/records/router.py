"""
Record read API endpoints (normalized envelope with relations).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from . import service
from .dependencies import DocumentStore, get_store

router = APIRouter()


@router.get("/collections/{collection}")
async def list_records(
    collection: str,
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    store: DocumentStore = Depends(get_store),
) -> dict:
    return await service.list_records(collection, store=store, limit=limit, offset=offset)


@router.get("/collections/{collection}/{record_id}")
async def get_record(
    collection: str,
    record_id: str,
    store: DocumentStore = Depends(get_store),
) -> dict:
    return await service.get_record(collection, record_id, store=store)
