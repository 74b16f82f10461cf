"""Domain entities."""

from propimport.domain.entities.property_record import PropertyRecord

__all__ = ["PropertyRecord"]
