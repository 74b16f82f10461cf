"""Text extractor port."""

from typing import Protocol


class TextExtractor(Protocol):
    """Port for turning PDF bytes into plain text."""

    def extract(self, data: bytes) -> str: ...
