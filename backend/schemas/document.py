"""Document request and response schemas."""

from typing import List, Optional

from beanie import PydanticObjectId
from pydantic import BaseModel, ConfigDict, Field

from schemas.common import BaseSchema, ObjectIdStr, TimestampSchema


# ============================================================================
# Requests
# ============================================================================

class DocumentCreate(BaseModel):
    """Fields a user may set when submitting a document."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    content: Optional[str] = None
    subject: Optional[PydanticObjectId] = None


class DocumentCreateByAdmin(DocumentCreate):
    """Administrators may publish a document already approved."""

    is_approved: Optional[bool] = None


class DocumentUpdate(BaseModel):
    """Editable subset of a document. Approval and author are not editable here."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    description: Optional[str] = None
    content: Optional[str] = None


class DocumentApproveRequest(BaseModel):
    is_approved: bool


class DocumentFilter(BaseModel):
    """
    Exact-match filter for the administrative listing.

    Only these fields may be filtered on; anything else is rejected
    rather than passed to MongoDB.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    is_approved: Optional[bool] = None
    author: Optional[PydanticObjectId] = None
    subject: Optional[PydanticObjectId] = None

    def to_query(self) -> dict:
        return self.model_dump(exclude_none=True)


# ============================================================================
# Responses
# ============================================================================

class AuthorResponse(BaseSchema):
    id: ObjectIdStr
    name: str
    email: str
    avatar: Optional[str] = None


class SubjectResponse(BaseSchema):
    id: ObjectIdStr
    name: str
    description: Optional[str] = None


class DocumentResponse(TimestampSchema):
    """A document with raw author/subject references."""

    id: ObjectIdStr
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    is_approved: bool
    author: ObjectIdStr
    subject: Optional[ObjectIdStr] = None


class PopulatedDocumentResponse(TimestampSchema):
    """A document with author and subject expanded."""

    id: ObjectIdStr
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    is_approved: bool
    author: Optional[AuthorResponse] = None
    subject: Optional[SubjectResponse] = None


class SubjectDocumentsResponse(BaseSchema):
    documents: List[PopulatedDocumentResponse]
    subject: Optional[SubjectResponse] = None
