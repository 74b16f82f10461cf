"""Domain value objects."""

from propimport.domain.value_objects.extraction_schema import (
    EXTRACTION_FIELDS,
    EXTRACTION_SCHEMA,
    FieldType,
)
from propimport.domain.value_objects.import_status import ImportStatus

__all__ = [
    "EXTRACTION_FIELDS",
    "EXTRACTION_SCHEMA",
    "FieldType",
    "ImportStatus",
]
