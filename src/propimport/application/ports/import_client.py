"""Import function client port."""

from typing import Any, Protocol


class ImportFunctionClient(Protocol):
    """Port for invoking the import endpoint."""

    async def invoke(
        self, access_token: str, pdf_url: str, file_name: str
    ) -> dict[str, Any]: ...
