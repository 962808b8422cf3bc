"""
Generic relation discovery and hydration for API responses.
"""

from core.errors import RecordValidationError, RelationsError, StorageError
from .loader import BatchEntityLoader, BatchReader
from .scanner import Reference, group_relations, scan_record
from .schemas import NormalizedResponse
from .service import build_relations_map, get_relations, normalize, normalized_response

__all__ = [
    "BatchEntityLoader",
    "BatchReader",
    "NormalizedResponse",
    "RecordValidationError",
    "Reference",
    "RelationsError",
    "StorageError",
    "build_relations_map",
    "get_relations",
    "group_relations",
    "normalize",
    "normalized_response",
    "scan_record",
]
