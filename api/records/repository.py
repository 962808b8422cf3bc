"""
Document store persistence (raw SQL).

Documents of every collection live in one table:

    CREATE TABLE documents (
        collection text NOT NULL,
        id text NOT NULL,
        body jsonb NOT NULL,
        created_at timestamptz NOT NULL DEFAULT now(),
        PRIMARY KEY (collection, id)
    );

`body` holds the record as stored; its `id` always matches the row's.
This module is the store handed to the relation loader (`batch_read_by_ids`).
"""

from __future__ import annotations

from typing import Any

from core import db


def _with_id(row: dict[str, Any]) -> dict[str, Any]:
    body = dict(row["body"] or {})
    body["id"] = str(row["id"])
    return body


async def batch_read_by_ids(collection: str, ids: list[str]) -> list[dict[str, Any]]:
    if not ids:
        return []
    rows = await db.fetch_all(
        """
        SELECT id, body
        FROM documents
        WHERE collection = $1
          AND id = ANY($2::text[])
        """,
        collection,
        ids,
    )
    return [_with_id(row) for row in rows]


async def read_by_id(collection: str, record_id: str) -> dict[str, Any] | None:
    row = await db.fetch_one(
        """
        SELECT id, body
        FROM documents
        WHERE collection = $1
          AND id = $2
        LIMIT 1
        """,
        collection,
        record_id,
    )
    return _with_id(row) if row is not None else None


async def list_records(collection: str, *, limit: int, offset: int = 0) -> list[dict[str, Any]]:
    rows = await db.fetch_all(
        """
        SELECT id, body
        FROM documents
        WHERE collection = $1
        ORDER BY created_at DESC, id ASC
        LIMIT $2 OFFSET $3
        """,
        collection,
        limit,
        offset,
    )
    return [_with_id(row) for row in rows]
