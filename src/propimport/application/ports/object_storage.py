"""Object storage port."""

from typing import Protocol


class ObjectStorage(Protocol):
    """Port for temporary file storage with fetchable URLs."""

    async def upload(
        self, path: str, data: bytes, content_type: str, upsert: bool = True
    ) -> None: ...

    async def get_url(self, path: str) -> str: ...
