"""
Record read endpoints' business logic.

Collection names in URLs are lower-cased singular nouns (`report`); the store
keeps them capitalized (`Report`), like the relation engine.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from core import settings
from core.errors import RecordValidationError, StorageError
from relations import normalized_response
from relations.scanner import capitalize

from .dependencies import DocumentStore


def store_collection(collection: str) -> str:
    name = (collection or "").strip()
    if not name:
        raise HTTPException(status_code=400, detail="Collection name is required.")
    return capitalize(name.lower())


def _page_limit(limit: int | None) -> int:
    if limit is None:
        return settings.page_size()
    return max(1, min(limit, settings.max_page_size()))


async def _respond(records, *, collection: str, store: DocumentStore) -> dict:
    try:
        response = await normalized_response(
            records,
            collection=collection,
            reader=store,
            include_primary=True,
            tolerate_storage_errors=settings.tolerate_storage_errors(),
        )
    except RecordValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to load related records: {exc}",
        ) from exc
    return response.to_dict()


async def get_record(collection: str, record_id: str, *, store: DocumentStore) -> dict:
    name = store_collection(collection)
    record = await store.read_by_id(name, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"{name} not found.")
    return await _respond(record, collection=name, store=store)


async def list_records(
    collection: str,
    *,
    store: DocumentStore,
    limit: int | None = None,
    offset: int = 0,
) -> dict:
    name = store_collection(collection)
    rows = await store.list_records(name, limit=_page_limit(limit), offset=max(0, offset))
    return await _respond(rows, collection=name, store=store)
