"""Upload DTOs."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


@dataclass(frozen=True)
class SelectedFile:
    """File picked by the user for upload."""

    name: str
    content_type: str | None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ClientSession:
    """Authenticated session on the uploading side."""

    user_id: str
    access_token: str
    refresh_token: str | None = None


class NotificationType(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Single message shown to the user after an action."""

    message: str
    type: NotificationType
    record: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.type == NotificationType.SUCCESS
