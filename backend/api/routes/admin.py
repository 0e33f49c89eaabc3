"""Admin API routes."""

from typing import List, Optional

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from api.dependencies import get_page_params, require_admin
from schemas import (
    DocumentApproveRequest,
    DocumentCreateByAdmin,
    DocumentFilter,
    DocumentResponse,
    ErrorResponse,
    PageParams,
    PopulatedDocumentResponse,
)
from services import document_service
from utils.errors import ErrorCodes, HttpException

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)

PAGING_KEYS = frozenset(PageParams.model_fields)


def get_document_filter(
    request: Request,
    title: Optional[str] = Query(default=None),
    is_approved: Optional[bool] = Query(default=None),
    author: Optional[str] = Query(default=None),
    subject: Optional[str] = Query(default=None),
) -> DocumentFilter:
    """
    Build the whitelisted filter from query parameters.

    Query keys that are neither filter fields nor paging parameters are
    handed to the filter as well, so its forbid rule rejects them.
    """
    unknown = {
        key: value
        for key, value in request.query_params.items()
        if key not in DocumentFilter.model_fields and key not in PAGING_KEYS
    }
    try:
        return DocumentFilter(
            title=title,
            is_approved=is_approved,
            author=author,
            subject=subject,
            **unknown,
        )
    except ValidationError as e:
        raise HttpException.bad_request(str(e)) from e


@router.get("/documents", response_model=List[PopulatedDocumentResponse])
async def list_all_documents(
    document_filter: DocumentFilter = Depends(get_document_filter),
    params: PageParams = Depends(get_page_params),
    admin_id: PydanticObjectId = Depends(require_admin),
):
    """List documents, approved or not, filtered by exact field values."""
    documents = await document_service.get_documents_by_admin(document_filter, params)
    return [PopulatedDocumentResponse.model_validate(d) for d in documents]


@router.post("/documents", response_model=DocumentResponse, status_code=201)
async def create_document(
    payload: DocumentCreateByAdmin,
    admin_id: PydanticObjectId = Depends(require_admin),
):
    """Create a document as an administrator, optionally pre-approved."""
    document = await document_service.create_document_by_admin(payload, admin_id)
    return DocumentResponse.model_validate(document)


@router.patch("/documents/{document_id}/approve", response_model=DocumentResponse)
async def approve_document(
    document_id: str,
    payload: DocumentApproveRequest,
    admin_id: PydanticObjectId = Depends(require_admin),
):
    """Approve or reject a document. Returns the document before the change."""
    document = await document_service.approve_document(payload, document_id)
    if document is None:
        raise HttpException.from_error_code(404, ErrorCodes.NOT_FOUND)
    return DocumentResponse.model_validate(document)
