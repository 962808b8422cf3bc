"""
Relation engine failures, shared by the entity catalog and the relation engine.

Validation failures are caller-input problems; storage failures are
server-side and abort relation loading as a whole.
"""

from __future__ import annotations


class RelationsError(RuntimeError):
    pass


class RecordValidationError(RelationsError):
    pass


class StorageError(RelationsError):
    def __init__(self, collection: str, message: str) -> None:
        super().__init__(f"{collection}: {message}")
        self.collection = collection
