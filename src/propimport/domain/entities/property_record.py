"""Property record entity - structured output of one import."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from propimport.domain.value_objects import ImportStatus


@dataclass
class PropertyRecord:
    """Property extracted from a PDF listing, owned by the importing user.

    Extracted fields are stored as returned by the model; they are not
    type-checked against the extraction schema.
    """

    id: UUID
    user_id: str
    source_pdf_name: str | None
    created_at: datetime
    address: Any = None
    price: Any = None
    bedrooms: Any = None
    bathrooms: Any = None
    car_spaces: Any = None
    land_area_sqm: Any = None
    house_area_sqm: Any = None
    description: Any = None
    features: Any = None
    status: ImportStatus = field(default=ImportStatus.IMPORTED)
