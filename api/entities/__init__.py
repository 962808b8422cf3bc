"""
Entity catalog: typed variants, hyperlinks and coercion from raw records.
"""

from .coercion import coerce_entity, variant_for
from .links import Hyperlink
from .schemas import (
    ENTITY_VARIANTS,
    BaseEntity,
    Comment,
    OpaqueEntity,
    Organization,
    RelationsMap,
    Report,
    Team,
    User,
    entity_to_wire,
)

__all__ = [
    "ENTITY_VARIANTS",
    "BaseEntity",
    "Comment",
    "Hyperlink",
    "OpaqueEntity",
    "Organization",
    "RelationsMap",
    "Report",
    "Team",
    "User",
    "coerce_entity",
    "entity_to_wire",
    "variant_for",
]
