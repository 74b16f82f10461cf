"""Property repository port."""

from typing import Protocol

from propimport.domain.entities import PropertyRecord


class PropertyRepository(Protocol):
    """Port for property record persistence. Records are insert-only."""

    async def create(self, record: PropertyRecord) -> PropertyRecord: ...
