"""Fixed schema the completion output is shaped by."""

from enum import StrEnum
from types import MappingProxyType


class FieldType(StrEnum):
    """Type names as written into the completion instruction."""

    STRING = "string"
    NUMBER = "number"
    STRING_ARRAY = "array<string>"


# Order matters: it is the order shown to the model and stored on the record.
EXTRACTION_SCHEMA: MappingProxyType[str, FieldType] = MappingProxyType(
    {
        "address": FieldType.STRING,
        "price": FieldType.NUMBER,
        "bedrooms": FieldType.NUMBER,
        "bathrooms": FieldType.NUMBER,
        "car_spaces": FieldType.NUMBER,
        "land_area_sqm": FieldType.NUMBER,
        "house_area_sqm": FieldType.NUMBER,
        "description": FieldType.STRING,
        "features": FieldType.STRING_ARRAY,
    }
)

EXTRACTION_FIELDS: tuple[str, ...] = tuple(EXTRACTION_SCHEMA)
