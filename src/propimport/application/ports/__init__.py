"""Application ports - interfaces for external adapters."""

from propimport.application.ports.completion_provider import CompletionProvider
from propimport.application.ports.identity_provider import IdentityProvider, OIDCUser
from propimport.application.ports.import_client import ImportFunctionClient
from propimport.application.ports.object_storage import ObjectStorage
from propimport.application.ports.pdf_fetcher import PdfFetcher
from propimport.application.ports.session_provider import SessionProvider
from propimport.application.ports.text_extractor import TextExtractor
from propimport.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "CompletionProvider",
    "IdentityProvider",
    "ImportFunctionClient",
    "OIDCUser",
    "ObjectStorage",
    "PdfFetcher",
    "SessionProvider",
    "TextExtractor",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
