"""
Foreign-key discovery.

A top-level field is a relation field when its name ends in `_id` (one id) or
`_ids` (a list of ids). The target collection is the field name without the
suffix, first letter upper-cased: `team_id` -> `Team`, `comment_ids` ->
`Comment`. Field mappings add relation fields that do not follow the
convention (`participants` -> `User`) and can redirect a derived collection
name (`Author` -> `User`).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from core.errors import RecordValidationError

SINGULAR_SUFFIX = "_id"
PLURAL_SUFFIX = "_ids"

FieldMappings = Mapping[str, str]

# Relation fields per entity type that the suffix rule cannot see.
DEFAULT_FIELD_MAPPINGS: dict[str, dict[str, str]] = {
    "discussion": {"participants": "User", "assignees": "User"},
}


@dataclass(frozen=True)
class Reference:
    collection: str
    id: str


def capitalize(name: str) -> str:
    # Only the first character changes; `str.capitalize` would lower the rest.
    return name[:1].upper() + name[1:]


def field_mappings_for(entity_type: str | None, extra: FieldMappings | None = None) -> dict[str, str]:
    mappings = dict(DEFAULT_FIELD_MAPPINGS.get((entity_type or "").lower(), {}))
    if extra:
        mappings.update(extra)
    return mappings


def target_collection(field: str, mappings: FieldMappings | None = None) -> str | None:
    """
    Collection a field points at, or None when it is not a relation field.
    """
    mappings = mappings or {}
    if field in mappings:
        return mappings[field]

    if field.endswith(PLURAL_SUFFIX):
        stem = field[: -len(PLURAL_SUFFIX)]
    elif field.endswith(SINGULAR_SUFFIX):
        stem = field[: -len(SINGULAR_SUFFIX)]
    else:
        return None

    # A bare `_id` is the record's own key.
    if not stem:
        return None

    collection = capitalize(stem)
    return mappings.get(collection, collection)


def _ids(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and item != ""]
    if value == "":
        return []
    return [str(value)]


def scan_record(record: Any, mappings: FieldMappings | None = None) -> list[Reference]:
    """
    References found in one record's top-level fields.

    Duplicates inside a list field are kept; grouping removes them.
    """
    if not isinstance(record, Mapping):
        raise RecordValidationError(f"Record must be an object, got {type(record).__name__}.")

    references: list[Reference] = []
    for field, value in record.items():
        collection = target_collection(str(field), mappings)
        if collection is None:
            continue
        references.extend(Reference(collection=collection, id=entity_id) for entity_id in _ids(value))
    return references


def group_relations(records: Iterable[Any], mappings: FieldMappings | None = None) -> dict[str, list[str]]:
    """
    Unique ids to fetch per collection, across a batch of records.

    Returns `{}` when nothing in the batch references anything.
    """
    grouped: dict[str, dict[str, None]] = {}
    for record in records:
        for reference in scan_record(record, mappings):
            grouped.setdefault(reference.collection, {})[reference.id] = None
    return {collection: list(ids) for collection, ids in grouped.items()}
