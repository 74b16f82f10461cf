"""Repository ports."""

from propimport.application.ports.repositories.property_repository import (
    PropertyRepository,
)

__all__ = ["PropertyRepository"]
