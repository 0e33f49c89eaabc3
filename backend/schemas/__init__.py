"""Request/response schemas."""

from schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    ObjectIdStr,
    PageParams,
    TimestampSchema,
)
from schemas.document import (
    AuthorResponse,
    DocumentApproveRequest,
    DocumentCreate,
    DocumentCreateByAdmin,
    DocumentFilter,
    DocumentResponse,
    DocumentUpdate,
    PopulatedDocumentResponse,
    SubjectDocumentsResponse,
    SubjectResponse,
)

__all__ = [
    "AuthorResponse",
    "BaseSchema",
    "DocumentApproveRequest",
    "DocumentCreate",
    "DocumentCreateByAdmin",
    "DocumentFilter",
    "DocumentResponse",
    "DocumentUpdate",
    "ErrorDetail",
    "ErrorResponse",
    "ObjectIdStr",
    "PageParams",
    "PopulatedDocumentResponse",
    "SubjectDocumentsResponse",
    "SubjectResponse",
    "TimestampSchema",
]
