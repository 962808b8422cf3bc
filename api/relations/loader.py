"""
Batch loading of referenced entities.

One store query per collection, all collections fetched concurrently. Any
failing fetch aborts the whole load: the other in-flight fetches are cancelled
and a `StorageError` is raised, never a partial result.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from core.errors import StorageError

logger = logging.getLogger(__name__)


class BatchReader(Protocol):
    async def batch_read_by_ids(self, collection: str, ids: list[str]) -> list[dict[str, Any]]: ...


class BatchEntityLoader:
    def __init__(self, reader: BatchReader) -> None:
        self._reader = reader

    async def _fetch(self, collection: str, ids: Sequence[str]) -> list[dict[str, Any]]:
        try:
            rows = await self._reader.batch_read_by_ids(collection, list(ids))
        except StorageError:
            raise
        except Exception as exc:
            logger.exception("relations_fetch_failed collection=%s ids=%s", collection, len(ids))
            raise StorageError(collection, f"batch read failed: {exc}") from exc
        return list(rows or [])

    async def load(self, grouped: Mapping[str, Sequence[str]]) -> dict[str, list[dict[str, Any]]]:
        collections = [c for c, ids in grouped.items() if ids]
        if not collections:
            return {}

        tasks = [asyncio.create_task(self._fetch(c, grouped[c])) for c in collections]
        try:
            results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        loaded = dict(zip(collections, results))
        for collection in collections:
            self._log_missing(collection, grouped[collection], loaded[collection])
        return loaded

    @staticmethod
    def _log_missing(collection: str, requested: Sequence[str], rows: list[dict[str, Any]]) -> None:
        found = {str(row.get("id", row.get("_id"))) for row in rows if isinstance(row, Mapping)}
        missing = [entity_id for entity_id in requested if entity_id not in found]
        if missing:
            logger.info("relations_missing collection=%s ids=%s", collection, ",".join(missing))
