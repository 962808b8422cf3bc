"""
Relation hydration (orchestration).

This is where we:
- scan primary records for references and group them per collection
- batch-load the referenced entities through the injected store
- coerce them into entity variants keyed `{collection: {id: entity}}`
- decorate data and relations with hyperlinks into the response envelope

Collection names are capitalized while grouping and loading (`Team`) and
lower-cased in the relations map and on the wire (`team`).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from core.errors import RecordValidationError, StorageError
from entities import BaseEntity, RelationsMap, coerce_entity, variant_for

from . import scanner
from .loader import BatchEntityLoader, BatchReader
from .schemas import NormalizedResponse

logger = logging.getLogger(__name__)

Records = Mapping[str, Any] | Sequence[Any]


def _as_list(records: Any) -> list[Any]:
    if records is None:
        return []
    if isinstance(records, (Mapping, BaseEntity)):
        return [records]
    if isinstance(records, (list, tuple)):
        return list(records)
    raise RecordValidationError(f"Expected a record or a list of records, got {type(records).__name__}.")


def _scannable(record: Any) -> Any:
    if isinstance(record, BaseEntity):
        return record.model_dump(exclude={"self_url"})
    return record


def build_relations_map(loaded: Mapping[str, Sequence[Any]]) -> RelationsMap:
    relations: RelationsMap = {}
    for collection, rows in loaded.items():
        if variant_for(collection) is None:
            logger.warning("relations_unknown_collection collection=%s rows=%s", collection, len(rows))
        entities = relations.setdefault(collection.lower(), {})
        for row in rows:
            if row is None:
                continue
            entity = coerce_entity(row, collection)
            # Duplicate ids from the store: last one wins.
            entities[entity.id] = entity
    return relations


async def get_relations(
    records: Records | None,
    *,
    reader: BatchReader,
    entity_type: str | None = None,
    mappings: scanner.FieldMappings | None = None,
) -> RelationsMap | None:
    """
    Load every entity the records reference.

    Returns None when the records reference nothing at all. With
    `entity_type`, the records themselves are added under that key too.
    """
    items = _as_list(records)
    field_mappings = scanner.field_mappings_for(entity_type, mappings)
    grouped = scanner.group_relations([_scannable(r) for r in items], field_mappings)
    if not grouped:
        return None

    loaded = await BatchEntityLoader(reader).load(grouped)
    relations = build_relations_map(loaded)

    if entity_type:
        key = entity_type.lower()
        own = relations.setdefault(key, {})
        for item in items:
            entity = coerce_entity(item, scanner.capitalize(key))
            own[entity.id] = entity
    return relations


def _check_homogeneous(entities: list[BaseEntity]) -> None:
    kinds = {type(entity) for entity in entities}
    if len(kinds) > 1:
        names = ", ".join(sorted(kind.__name__ for kind in kinds))
        raise RecordValidationError(f"Response data mixes entity types: {names}.")


def normalize(
    data: BaseEntity | Sequence[BaseEntity] | None,
    relations: RelationsMap | None = None,
) -> NormalizedResponse:
    """
    Attach hyperlinks to data and related entities.

    Pure: the given entities are left as they are and decorated copies are
    returned, so running it twice gives the same links.
    """
    decorated_relations: RelationsMap | None = None
    if relations is not None:
        decorated_relations = {
            collection: {entity_id: entity.with_hyperlink(relations) for entity_id, entity in entities.items()}
            for collection, entities in relations.items()
        }

    if data is None:
        return NormalizedResponse(data=None, relations=decorated_relations)

    if isinstance(data, BaseEntity):
        return NormalizedResponse(data=data.with_hyperlink(relations), relations=decorated_relations)

    entities = list(data)
    _check_homogeneous(entities)
    return NormalizedResponse(
        data=[entity.with_hyperlink(relations) for entity in entities],
        relations=decorated_relations,
    )


async def normalized_response(
    records: Records | None,
    *,
    collection: str,
    reader: BatchReader,
    include_primary: bool = False,
    mappings: scanner.FieldMappings | None = None,
    tolerate_storage_errors: bool = False,
) -> NormalizedResponse:
    """
    Full pipeline: coerce primary records, hydrate relations, normalize.

    `collection` is the primary records' collection (`Report` or `report`).
    A single mapping gives a single entity in `data`, a sequence gives a list.
    With `tolerate_storage_errors`, a failed relation load yields
    `relations=None` instead of raising.
    """
    variant_name = scanner.capitalize(collection)
    if records is None:
        return normalize(None, None)

    single = isinstance(records, (Mapping, BaseEntity))
    items = _as_list(records)
    entities = [coerce_entity(item, variant_name) for item in items]

    try:
        relations = await get_relations(
            items,
            reader=reader,
            entity_type=collection.lower() if include_primary else None,
            mappings=scanner.field_mappings_for(collection, mappings),
        )
    except StorageError:
        if not tolerate_storage_errors:
            raise
        logger.warning("relations_dropped collection=%s records=%s", collection, len(items))
        relations = None

    return normalize(entities[0] if single else entities, relations)
