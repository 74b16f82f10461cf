"""PDF fetcher over HTTP."""

import httpx

from propimport.domain.exceptions import UpstreamFetchError


class HttpPdfFetcher:
    """Downloads PDF bytes with httpx."""

    def __init__(
        self, timeout: float = 30.0, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """GET url and return the body. Raises UpstreamFetchError on any failure."""
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UpstreamFetchError(f"Failed to fetch PDF: {e}") from e
        if not response.is_success:
            raise UpstreamFetchError(f"Failed to fetch PDF: {response.reason_phrase}")
        return response.content
