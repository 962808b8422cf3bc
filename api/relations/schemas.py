"""
Response envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from entities import BaseEntity, RelationsMap, entity_to_wire


@dataclass(frozen=True)
class NormalizedResponse:
    data: BaseEntity | list[BaseEntity] | None
    relations: RelationsMap | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.data is None:
            data: Any = None
        elif isinstance(self.data, list):
            data = [entity_to_wire(entity) for entity in self.data]
        else:
            data = entity_to_wire(self.data)

        relations: dict[str, Any] | None = None
        if self.relations is not None:
            relations = {
                collection: {entity_id: entity_to_wire(entity) for entity_id, entity in entities.items()}
                for collection, entities in self.relations.items()
            }
        return {"data": data, "relations": relations}
