"""Services module."""

from services.document_service import (
    DocumentService,
    SubjectDocuments,
    document_service,
    resolve_paging,
)
from services.populate import populate_document, populate_documents

__all__ = [
    "DocumentService",
    "SubjectDocuments",
    "document_service",
    "populate_document",
    "populate_documents",
    "resolve_paging",
]
