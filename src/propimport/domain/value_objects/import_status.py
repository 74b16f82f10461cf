"""Import status of a property record."""

from enum import StrEnum


class ImportStatus(StrEnum):
    """Lifecycle status stored on property records."""

    IMPORTED = "imported"
