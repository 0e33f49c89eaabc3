"""
StudyDocument MongoDB Schema

Defines the StudyDocument model for the 'documents' collection.

Schema Fields:
- _id: ObjectId
- title: Document title (required)
- description: Short summary
- content: Document body
- is_approved: Set by an administrator; only approved documents are public
- author: Reference to users (ObjectId)
- subject: Reference to subjects (ObjectId)
- created_at, updated_at: Timestamps

Indexes:
- is_approved
- author
- Compound: (subject, is_approved) for the per-subject listing
"""

from datetime import datetime
from typing import Optional

from beanie import PydanticObjectId
from pydantic import BaseModel
from pymongo import ASCENDING, IndexModel

from database.base import BaseDocument
from models.subject import SubjectView
from models.user import AuthorView


class StudyDocument(BaseDocument):
    """A user-submitted study document."""

    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    is_approved: bool = False
    author: PydanticObjectId
    subject: Optional[PydanticObjectId] = None

    class Settings(BaseDocument.Settings):
        name = "documents"
        indexes = [
            IndexModel([("is_approved", ASCENDING)], name="is_approved"),
            IndexModel([("author", ASCENDING)], name="author"),
            IndexModel(
                [("subject", ASCENDING), ("is_approved", ASCENDING)],
                name="subject_is_approved",
            ),
        ]


class PopulatedDocument(BaseModel):
    """A StudyDocument with its author and subject references expanded."""

    id: Optional[PydanticObjectId] = None
    title: str
    description: Optional[str] = None
    content: Optional[str] = None
    is_approved: bool = False
    author: Optional[AuthorView] = None
    subject: Optional[SubjectView] = None
    created_at: datetime
    updated_at: datetime
