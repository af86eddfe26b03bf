"""
Document upload and management endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, File, Form, Response, UploadFile, status
from fastapi.responses import FileResponse

from jobtracker.api.deps import CurrentUserDep, FileStorageDep, SessionDep
from jobtracker.db.models import DocumentType
from jobtracker.models.schemas import DocumentResponse, DocumentSummary, DocumentUpdateRequest
from jobtracker.services.document_service import DocumentService

router = APIRouter()


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
    file: UploadFile = File(...),
    applicationId: int = Form(...),
    documentType: DocumentType = Form(...),
    description: Optional[str] = Form(None, max_length=500),
):
    """
    Upload a file and attach it to one of the caller's applications.

    Accepted types: PDF, Word, Excel, JPEG, PNG and plain text.
    """
    content = await file.read()
    document = await DocumentService(session, storage).upload_document(
        identity=current_user,
        application_id=applicationId,
        document_type=documentType,
        content=content,
        filename=file.filename,
        content_type=file.content_type,
        description=description,
    )
    return DocumentResponse.from_model(document)


@router.get("/application/{application_id}", response_model=List[DocumentResponse])
async def list_documents_for_application(
    application_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    documents = await DocumentService(session, storage).list_for_application(
        application_id, current_user
    )
    return [DocumentResponse.from_model(d) for d in documents]


@router.get("/my-documents", response_model=List[DocumentResponse])
async def list_my_documents(
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    """All of the caller's documents, most recently uploaded first."""
    documents = await DocumentService(session, storage).list_mine(current_user)
    return [DocumentResponse.from_model(d) for d in documents]


@router.get("/summary", response_model=DocumentSummary)
async def get_document_summary(
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    return await DocumentService(session, storage).get_summary(current_user)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    document = await DocumentService(session, storage).get_document(document_id, current_user)
    return DocumentResponse.from_model(document)


@router.get("/{document_id}/download")
async def download_document(
    document_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    """Stream the stored file back under its original name."""
    path, document = await DocumentService(session, storage).get_download(
        document_id, current_user
    )
    return FileResponse(
        path,
        media_type="application/octet-stream",
        filename=document.original_filename,
    )


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    request: DocumentUpdateRequest,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    document = await DocumentService(session, storage).update_description(
        document_id, current_user, request.description
    )
    return DocumentResponse.from_model(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    session: SessionDep,
    current_user: CurrentUserDep,
    storage: FileStorageDep,
):
    """Delete the document record and its stored file."""
    await DocumentService(session, storage).delete_document(document_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
