"""
Reference expansion for documents.

Replaces the author/subject ObjectIds of a page of documents with the
projected User and Subject records. One $in query per referenced
collection, then an in-memory join; dangling references become None.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Type

from beanie import Document, PydanticObjectId
from beanie.operators import In
from pydantic import BaseModel

from models import AuthorView, PopulatedDocument, StudyDocument, Subject, SubjectView, User

logger = logging.getLogger(__name__)


async def _fetch_views(
    model: Type[Document],
    view: Type[BaseModel],
    ids: Iterable[PydanticObjectId],
) -> Dict[PydanticObjectId, BaseModel]:
    ids = list(ids)
    if not ids:
        return {}

    records = await model.find(In(model.id, ids)).project(view).to_list()
    return {record.id: record for record in records}


def _log_unresolved(
    kind: str,
    ids: Set[PydanticObjectId],
    found: Dict[PydanticObjectId, BaseModel],
) -> None:
    missing = ids - set(found)
    if missing:
        logger.warning(
            f"{len(missing)} {kind} reference(s) could not be resolved: "
            f"{sorted(str(i) for i in missing)}"
        )


def _join(
    document: StudyDocument,
    authors: Dict[PydanticObjectId, BaseModel],
    subjects: Dict[PydanticObjectId, BaseModel],
) -> PopulatedDocument:
    data = document.model_dump(exclude={"author", "subject", "revision_id"})
    return PopulatedDocument(
        **data,
        author=authors.get(document.author),
        subject=subjects.get(document.subject) if document.subject else None,
    )


async def populate_documents(
    documents: Sequence[StudyDocument],
) -> List[PopulatedDocument]:
    """Expand author and subject on every document, preserving order."""
    author_ids = {d.author for d in documents}
    subject_ids = {d.subject for d in documents if d.subject}

    authors = await _fetch_views(User, AuthorView, author_ids)
    subjects = await _fetch_views(Subject, SubjectView, subject_ids)

    _log_unresolved("author", author_ids, authors)
    _log_unresolved("subject", subject_ids, subjects)

    return [_join(document, authors, subjects) for document in documents]


async def populate_document(
    document: Optional[StudyDocument],
) -> Optional[PopulatedDocument]:
    """Single-document form of populate_documents; None passes through."""
    if document is None:
        return None
    populated = await populate_documents([document])
    return populated[0]
