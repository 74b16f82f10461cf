"""Session provider port - uploading side authentication."""

from typing import Protocol

from propimport.application.dto.upload_dto import ClientSession


class SessionProvider(Protocol):
    """Port for reading and ending the current user session."""

    def get_session(self) -> ClientSession | None: ...

    def sign_out(self) -> None: ...
