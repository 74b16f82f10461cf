"""Domain exceptions."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Category of a failed import step."""

    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    UPSTREAM_FETCH = "upstream_fetch"
    EXTRACTION = "extraction"
    COMPLETION = "completion"
    COMPLETION_PARSE = "completion_parse"
    PERSISTENCE = "persistence"
    UPLOAD = "upload"
    PROCESSING = "processing"


class PropertyImportError(Exception):
    """Base exception for the importer. Carries a kind and a user-facing message."""

    kind: ErrorKind = ErrorKind.PROCESSING

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class ValidationError(PropertyImportError):
    """Input failed validation (bad file, missing field)."""

    kind = ErrorKind.VALIDATION


class AuthenticationError(PropertyImportError):
    """Missing or invalid session / bearer token."""

    kind = ErrorKind.AUTHENTICATION


class UpstreamFetchError(PropertyImportError):
    """PDF could not be fetched from its URL."""

    kind = ErrorKind.UPSTREAM_FETCH


class ExtractionError(PropertyImportError):
    """PDF is malformed or yields no text."""

    kind = ErrorKind.EXTRACTION


class CompletionError(PropertyImportError):
    """Completion API call failed."""

    kind = ErrorKind.COMPLETION


class CompletionParseError(PropertyImportError):
    """Completion content is not a JSON object."""

    kind = ErrorKind.COMPLETION_PARSE


class PersistenceError(PropertyImportError):
    """Store rejected the insert."""

    kind = ErrorKind.PERSISTENCE


class UploadError(PropertyImportError):
    """Object storage upload failed."""

    kind = ErrorKind.UPLOAD


class ProcessingError(PropertyImportError):
    """Import endpoint call failed or returned an unusable response."""

    kind = ErrorKind.PROCESSING
