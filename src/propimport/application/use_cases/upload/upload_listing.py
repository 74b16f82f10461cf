"""Upload listing use case - client side of the import flow."""

import logging
import time
from collections.abc import Callable
from typing import Any

from propimport.application.dto.upload_dto import (
    Notification,
    NotificationType,
    SelectedFile,
)
from propimport.application.ports import (
    ImportFunctionClient,
    ObjectStorage,
    SessionProvider,
)
from propimport.domain.exceptions import (
    AuthenticationError,
    ProcessingError,
    PropertyImportError,
    UploadError,
    ValidationError,
)

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
MAX_FILE_SIZE = 10 * 1024 * 1024
UNKNOWN_ADDRESS = "Unknown address"


def _now_ms() -> int:
    return int(time.time() * 1000)


def validate_file(file: SelectedFile) -> None:
    """Raise ValidationError when file is not a PDF or exceeds the size ceiling."""
    if file.content_type != PDF_CONTENT_TYPE:
        raise ValidationError("Please select a PDF file.")
    if file.size > MAX_FILE_SIZE:
        raise ValidationError("File size must be less than 10MB.")


def storage_path(user_id: str, file_name: str, timestamp_ms: int) -> str:
    """Object key scoped by user and upload time."""
    return f"{user_id}/{timestamp_ms}-{file_name}"


class UploadListingUseCase:
    """Select a PDF, upload it to storage and hand it to the import endpoint.

    Holds the current selection the way the upload form does: a rejected
    file is never selected, a failed import keeps the selection for retry
    and a successful import clears it.
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        storage: ObjectStorage,
        import_client: ImportFunctionClient,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._session_provider = session_provider
        self._storage = storage
        self._import_client = import_client
        self._clock = clock
        self.selected: SelectedFile | None = None

    def select(self, file: SelectedFile) -> Notification | None:
        """Validate and select file. Returns an error notification when rejected."""
        try:
            validate_file(file)
        except ValidationError as e:
            return Notification(message=e.message, type=NotificationType.ERROR)
        self.selected = file
        return None

    async def submit(self) -> Notification:
        """Upload the selected file and import it."""
        file = self.selected
        if file is None:
            return Notification(
                message="Please select a PDF document to import.",
                type=NotificationType.ERROR,
            )
        try:
            prop = await self._import(file)
        except PropertyImportError as e:
            logger.warning("Import of %s failed (%s): %s", file.name, e.kind, e.message)
            return Notification(message=e.message, type=NotificationType.ERROR)

        self.selected = None
        address = prop.get("address") or UNKNOWN_ADDRESS
        return Notification(
            message=f'Success! Property "{address}" has been imported and processed.',
            type=NotificationType.SUCCESS,
            record=prop,
        )

    def sign_out(self) -> None:
        self._session_provider.sign_out()
        self.selected = None

    async def _import(self, file: SelectedFile) -> dict[str, Any]:
        session = self._session_provider.get_session()
        if session is None:
            raise AuthenticationError("User is not authenticated. Please log in again.")

        path = storage_path(session.user_id, file.name, self._clock())
        try:
            await self._storage.upload(path, file.data, PDF_CONTENT_TYPE, upsert=True)
            url = await self._storage.get_url(path)
        except UploadError:
            raise
        except Exception as e:
            raise UploadError(f"Upload failed: {e}") from e

        body = await self._import_client.invoke(session.access_token, url, file.name)
        prop = body.get("property") if isinstance(body, dict) else None
        if not (isinstance(body, dict) and body.get("success") is True and isinstance(prop, dict)):
            raise ProcessingError("Processing failed: unexpected response from import service")
        return prop
