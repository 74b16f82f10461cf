"""PDF fetcher port."""

from typing import Protocol


class PdfFetcher(Protocol):
    """Port for downloading PDF bytes from a URL."""

    async def fetch(self, url: str) -> bytes: ...
