"""Documents API routes."""

from typing import List

from beanie import PydanticObjectId
from fastapi import APIRouter, Depends

from api.dependencies import get_caller_id, get_page_params
from schemas import (
    DocumentCreate,
    DocumentResponse,
    DocumentUpdate,
    ErrorResponse,
    PageParams,
    PopulatedDocumentResponse,
    SubjectDocumentsResponse,
    SubjectResponse,
)
from services import document_service
from utils.errors import ErrorCodes, HttpException

router = APIRouter(
    prefix="/documents",
    tags=["Documents"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


def _not_found() -> HttpException:
    return HttpException.from_error_code(404, ErrorCodes.NOT_FOUND)


@router.get("/", response_model=List[PopulatedDocumentResponse])
async def list_documents(params: PageParams = Depends(get_page_params)):
    """List approved documents."""
    documents = await document_service.get_documents(params)
    return [PopulatedDocumentResponse.model_validate(d) for d in documents]


@router.get("/subject/{subject_id}", response_model=SubjectDocumentsResponse)
async def list_documents_by_subject(subject_id: str):
    """Approved documents of a subject, with the subject record."""
    result = await document_service.get_documents_by_subject(subject_id)
    return SubjectDocumentsResponse(
        documents=[PopulatedDocumentResponse.model_validate(d) for d in result.documents],
        subject=(
            SubjectResponse.model_validate(result.subject) if result.subject else None
        ),
    )


@router.get("/{document_id}", response_model=PopulatedDocumentResponse)
async def get_document(document_id: str):
    """Get a single document with author and subject."""
    document = await document_service.get_document_by_id(document_id)
    if document is None:
        raise _not_found()
    return PopulatedDocumentResponse.model_validate(document)


@router.post("/", response_model=DocumentResponse, status_code=201)
async def create_document(
    payload: DocumentCreate,
    caller_id: PydanticObjectId = Depends(get_caller_id),
):
    """Submit a new document; it stays hidden until approved."""
    document = await document_service.create_document(payload, caller_id)
    return DocumentResponse.model_validate(document)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    payload: DocumentUpdate,
    caller_id: PydanticObjectId = Depends(get_caller_id),
):
    """Edit title, description or content. Returns the document before the edit."""
    document = await document_service.update_document(payload, document_id)
    if document is None:
        raise _not_found()
    return DocumentResponse.model_validate(document)


@router.delete("/{document_id}", response_model=DocumentResponse)
async def delete_document(
    document_id: str,
    caller_id: PydanticObjectId = Depends(get_caller_id),
):
    """Delete a document and return it."""
    document = await document_service.delete_document(document_id)
    if document is None:
        raise _not_found()
    return DocumentResponse.model_validate(document)
