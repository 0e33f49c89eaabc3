"""
MongoDB ODM Models Package

Collections:
- users: Document authors
- subjects: Categories documents are filed under
- documents: User-submitted study documents
"""

from typing import List, Type

from beanie import Document

from models.document import PopulatedDocument, StudyDocument
from models.subject import Subject, SubjectView
from models.user import ADMIN_ROLE, AuthorView, User


def get_document_models() -> List[Type[Document]]:
    """Document models registered with Beanie on startup."""
    return [User, Subject, StudyDocument]


__all__ = [
    "ADMIN_ROLE",
    "AuthorView",
    "PopulatedDocument",
    "StudyDocument",
    "Subject",
    "SubjectView",
    "User",
    "get_document_models",
]
