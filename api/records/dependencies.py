"""
Store dependency for record routes; tests override `get_store`.
"""

from __future__ import annotations

from typing import Any, Protocol

from relations import BatchReader

from . import repository


class DocumentStore(BatchReader, Protocol):
    async def read_by_id(self, collection: str, record_id: str) -> dict[str, Any] | None: ...

    async def list_records(self, collection: str, *, limit: int, offset: int = 0) -> list[dict[str, Any]]: ...


def get_store() -> DocumentStore:
    return repository  # type: ignore[return-value]
