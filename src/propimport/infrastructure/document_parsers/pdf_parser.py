"""Parser for PDF."""

import io

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from propimport.domain.exceptions import ExtractionError


def extract_pdf_text(data: bytes) -> str:
    """Extract text from every page in order, pages joined by a single space.

    Best effort: only raw text tokens are kept, layout is lost.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PyPdfError, ValueError, KeyError) as e:
        raise ExtractionError(f"Invalid or corrupted PDF: {e}") from e
    text = " ".join(pages)
    if not text.strip():
        raise ExtractionError("No text could be extracted from the PDF")
    return text


class PdfTextExtractor:
    """TextExtractor adapter over pypdf."""

    def extract(self, data: bytes) -> str:
        return extract_pdf_text(data)
