"""
Turn raw store records into typed entity variants.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from core.errors import RecordValidationError

from .schemas import ENTITY_VARIANTS, BaseEntity, OpaqueEntity, User

logger = logging.getLogger(__name__)

# Credentials and provider tokens stored on user documents.
HIDDEN_USER_FIELDS = frozenset({"hashed_password", "accessToken", "access_token", "accounts", "session_token"})


def variant_for(collection: str) -> type[BaseEntity] | None:
    return ENTITY_VARIANTS.get(collection)


def _record_id(record: Mapping[str, Any]) -> str:
    raw_id = record.get("id")
    if raw_id is None:
        raw_id = record.get("_id")
    if raw_id is None or raw_id == "":
        raise RecordValidationError("Record has no id.")
    return str(raw_id)


def coerce_entity(record: Any, collection: str) -> BaseEntity:
    """
    Build the entity variant registered for `collection` from `record`.

    Fields are copied across as they are. A record whose values do not match
    the variant's declared types is still accepted, unvalidated, so a stale
    document never breaks a response. Unknown collections give `OpaqueEntity`.
    """
    if isinstance(record, BaseEntity):
        return record
    if not isinstance(record, Mapping):
        raise RecordValidationError(f"{collection} record must be an object, got {type(record).__name__}.")

    data = {str(k): v for k, v in record.items() if k != "_id"}
    data["id"] = _record_id(record)

    variant = variant_for(collection)
    if variant is None:
        return OpaqueEntity.model_construct(_fields_set=set(data), **data)

    if issubclass(variant, User):
        for field in HIDDEN_USER_FIELDS:
            data.pop(field, None)

    try:
        return variant.model_validate(data)
    except ValidationError as exc:
        logger.debug(
            "coercion_fallback collection=%s id=%s errors=%s",
            collection,
            data["id"],
            exc.error_count(),
        )
        return variant.model_construct(_fields_set=set(data), **data)
