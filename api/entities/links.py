"""
Hyperlink helpers shared by every entity variant.

A link is a `{api, ui}` pair built from one relative path: `ui` is the path as
the web client routes it, `api` is the same path under `{SELF_URL}/v1`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from core import settings

if TYPE_CHECKING:
    from .schemas import BaseEntity


class Hyperlink(BaseModel):
    model_config = ConfigDict(frozen=True)

    api: str
    ui: str


def create_ref(relative_path: str) -> Hyperlink:
    return Hyperlink(api=f"{settings.api_base_url()}{relative_path}", ui=relative_path)


def lookup(
    relations: dict[str, dict[str, BaseEntity]] | None,
    collection: str,
    entity_id: Any,
) -> BaseEntity | None:
    """
    Find a sibling entity in a relations map; None when anything is missing.
    """
    if not relations or not isinstance(entity_id, str) or not entity_id:
        return None
    return (relations.get(collection) or {}).get(entity_id)


def segment(value: Any) -> str | None:
    # Only non-empty strings make usable path segments.
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
