"""Document CRUD, listing and approval service."""

import asyncio
import logging
from typing import List, NamedTuple, Optional, Tuple

from beanie import PydanticObjectId, UpdateResponse

from config import settings
from database.base import utc_now
from models import PopulatedDocument, StudyDocument, Subject
from schemas import (
    DocumentApproveRequest,
    DocumentCreate,
    DocumentCreateByAdmin,
    DocumentFilter,
    DocumentUpdate,
    PageParams,
)
from services.populate import populate_document, populate_documents
from utils.errors import HttpException, format_log_error

logger = logging.getLogger(__name__)


class SubjectDocuments(NamedTuple):
    documents: List[PopulatedDocument]
    subject: Optional[Subject]


def resolve_paging(params: Optional[PageParams]) -> Tuple[int, int]:
    """
    Return (page_size, current_page) with configured defaults applied.

    Zero counts as missing so that limit(0) never means "no limit".
    """
    params = params or PageParams()
    page_size = params.page_size or settings.pagination_default_limit
    current_page = params.current_page or settings.pagination_default_skip
    return page_size, current_page


class DocumentService:
    """
    Stateless operations over the documents collection.

    Each operation logs a fixed line on success. Any failure is logged and
    re-raised as a 400 HttpException; a missing id is not a failure and
    yields None.
    """

    async def get_documents(
        self, params: Optional[PageParams] = None
    ) -> List[PopulatedDocument]:
        """List approved documents, one page at a time."""
        try:
            page_size, current_page = resolve_paging(params)

            results = (
                await StudyDocument.find({"is_approved": True})
                .skip(page_size * current_page)
                .limit(page_size)
                .to_list()
            )
            populated = await populate_documents(results)

            logger.info("Get all documents successfully")
            return populated
        except Exception as e:
            logger.error(f"Error while get documents: {format_log_error(e)}")
            raise HttpException.bad_request() from e

    async def create_document(
        self, payload: DocumentCreate, author: PydanticObjectId
    ) -> StudyDocument:
        """Insert a document submitted by a user; the caller becomes the author."""
        try:
            document = StudyDocument(
                **payload.model_dump(exclude_unset=True),
                author=author,
            )
            result = await document.insert()

            logger.info("Create new document successfully")
            return result
        except Exception as e:
            logger.error(f"Error while create new document: {format_log_error(e)}")
            raise HttpException.bad_request(str(e)) from e

    async def create_document_by_admin(
        self, payload: DocumentCreateByAdmin, author: PydanticObjectId
    ) -> StudyDocument:
        """Insert a document on behalf of an administrator."""
        try:
            document = StudyDocument(
                **payload.model_dump(exclude_unset=True, exclude_none=True),
                author=author,
            )
            result = await document.insert()

            logger.info("Create new document by admin successfully")
            return result
        except Exception as e:
            logger.error(f"Error while create new document by admin: {format_log_error(e)}")
            raise HttpException.bad_request(str(e)) from e

    async def update_document(
        self, payload: DocumentUpdate, document_id: str
    ) -> Optional[StudyDocument]:
        """
        Update title, description and content in place.

        Returns the document as it was before the update, or None when no
        document has this id.
        """
        try:
            changes = payload.model_dump(
                include={"title", "description", "content"},
                exclude_unset=True,
                exclude_none=True,
            )
            changes["updated_at"] = utc_now()

            document = await StudyDocument.find_one(
                StudyDocument.id == PydanticObjectId(document_id)
            ).update(
                {"$set": changes},
                response_type=UpdateResponse.OLD_DOCUMENT,
            )

            logger.info("Update document successfully")
            return document
        except Exception as e:
            logger.error(f"Error while update document: {format_log_error(e)}")
            raise HttpException.bad_request() from e

    async def delete_document(self, document_id: str) -> Optional[StudyDocument]:
        """Remove a document; returns the removed document or None."""
        try:
            raw = await StudyDocument.get_motor_collection().find_one_and_delete(
                {"_id": PydanticObjectId(document_id)}
            )
            document = StudyDocument.model_validate(raw) if raw is not None else None

            logger.info("Delete document successfully")
            return document
        except Exception as e:
            logger.error(f"Error while delete document: {format_log_error(e)}")
            raise HttpException.bad_request() from e

    async def get_document_by_id(self, document_id: str) -> Optional[PopulatedDocument]:
        """Fetch one document with author and subject expanded."""
        try:
            result = await StudyDocument.find_one(
                StudyDocument.id == PydanticObjectId(document_id)
            )
            populated = await populate_document(result)

            logger.info("Get a document successfully")
            return populated
        except Exception as e:
            logger.error(f"Error while get a document: {format_log_error(e)}")
            raise HttpException.bad_request(str(e)) from e

    async def get_documents_by_admin(
        self,
        document_filter: Optional[DocumentFilter] = None,
        params: Optional[PageParams] = None,
    ) -> List[PopulatedDocument]:
        """List documents matching an exact-match filter, approved or not."""
        try:
            page_size, current_page = resolve_paging(params)
            query = {**(document_filter.to_query() if document_filter else {})}

            results = (
                await StudyDocument.find(query)
                .skip(page_size * current_page)
                .limit(page_size)
                .to_list()
            )
            populated = await populate_documents(results)

            logger.info("Get all documents by admin successfully")
            return populated
        except Exception as e:
            logger.error(f"Error while get documents by admin: {format_log_error(e)}")
            raise HttpException.bad_request() from e

    async def get_documents_by_subject(self, subject_id: str) -> SubjectDocuments:
        """
        Approved documents of a subject, together with the subject itself.

        The two lookups run concurrently and are not a consistent snapshot.
        If either fails the whole call fails.
        """
        try:
            oid = PydanticObjectId(subject_id)

            async def _documents() -> List[PopulatedDocument]:
                results = await StudyDocument.find(
                    {"is_approved": True, "subject": oid}
                ).to_list()
                return await populate_documents(results)

            documents, subject = await asyncio.gather(
                _documents(),
                Subject.find_one(Subject.id == oid),
            )

            logger.info("Get all documents by subject successfully")
            return SubjectDocuments(documents=documents, subject=subject)
        except Exception as e:
            logger.error(f"Error while get documents by subject: {format_log_error(e)}")
            raise HttpException.bad_request() from e

    async def approve_document(
        self, payload: DocumentApproveRequest, document_id: str
    ) -> Optional[StudyDocument]:
        """
        Set or clear the approval flag; nothing else changes.

        Returns the document as it was before the change, or None.
        """
        try:
            logger.debug(
                f"Setting is_approved={payload.is_approved} on document {document_id}"
            )
            document = await StudyDocument.find_one(
                StudyDocument.id == PydanticObjectId(document_id)
            ).update(
                {"$set": {"is_approved": payload.is_approved, "updated_at": utc_now()}},
                response_type=UpdateResponse.OLD_DOCUMENT,
            )

            logger.info("Update document approval successfully")
            return document
        except Exception as e:
            logger.error(f"Error while update document approval: {format_log_error(e)}")
            raise HttpException.bad_request() from e


# Singleton instance
document_service = DocumentService()
