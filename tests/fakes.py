"""
In-memory document stores standing in for Postgres.
"""

from __future__ import annotations

import asyncio
from typing import Any


class FakeStore:
    """Keeps documents per collection and records every batch call."""

    def __init__(self, documents: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.documents = documents or {}
        self.calls: list[tuple[str, list[str]]] = []

    async def batch_read_by_ids(self, collection: str, ids: list[str]) -> list[dict[str, Any]]:
        self.calls.append((collection, list(ids)))
        wanted = set(ids)
        return [dict(doc) for doc in self.documents.get(collection, []) if doc.get("id") in wanted]

    async def read_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None:
        for doc in self.documents.get(collection, []):
            if doc.get("id") == record_id:
                return dict(doc)
        return None

    async def list_records(self, collection: str, *, limit: int, offset: int = 0) -> list[dict[str, Any]]:
        return [dict(doc) for doc in self.documents.get(collection, [])[offset : offset + limit]]


class FailingStore(FakeStore):
    """Fails reads for one collection; other reads hang until cancelled."""

    def __init__(self, failing: str, documents: dict[str, list[dict[str, Any]]] | None = None) -> None:
        super().__init__(documents)
        self.failing = failing
        self.cancelled: list[str] = []

    async def batch_read_by_ids(self, collection: str, ids: list[str]) -> list[dict[str, Any]]:
        self.calls.append((collection, list(ids)))
        if collection == self.failing:
            raise ConnectionError("connection refused")
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            self.cancelled.append(collection)
            raise
        return []
