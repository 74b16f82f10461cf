"""Import DTOs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass
class ImportPropertyInput:
    """Input for importing a property from a PDF URL."""

    pdf_url: str
    file_name: str | None = None


@dataclass
class PropertyOutput:
    """Output DTO for property record."""

    id: UUID
    user_id: str
    address: Any
    price: Any
    bedrooms: Any
    bathrooms: Any
    car_spaces: Any
    land_area_sqm: Any
    house_area_sqm: Any
    description: Any
    features: Any
    status: str
    source_pdf_name: str | None
    created_at: datetime
