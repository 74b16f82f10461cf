"""Client for the import endpoint."""

from typing import Any

import httpx

from propimport.domain.exceptions import ProcessingError


class HttpImportFunctionClient:
    """Calls POST import-property with the user's bearer token."""

    def __init__(
        self,
        url: str,
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def invoke(self, access_token: str, pdf_url: str, file_name: str) -> dict[str, Any]:
        """Invoke the import. Raises ProcessingError on transport error, non-2xx or bad body."""
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._url,
                    json={"pdfUrl": pdf_url, "fileName": file_name},
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProcessingError(f"Processing failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            detail = body.get("error") if isinstance(body, dict) else None
            raise ProcessingError(
                f"Processing failed: {detail or f'HTTP {response.status_code}'}"
            )
        if not isinstance(body, dict):
            raise ProcessingError("Processing failed: response is not a JSON object")
        return body
