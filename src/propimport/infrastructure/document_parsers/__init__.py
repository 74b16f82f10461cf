"""Document parsers: extract text from files."""

from propimport.infrastructure.document_parsers.pdf_parser import (
    PdfTextExtractor,
    extract_pdf_text,
)

__all__ = ["PdfTextExtractor", "extract_pdf_text"]
