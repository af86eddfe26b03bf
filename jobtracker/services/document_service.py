"""
Document service for uploads attached to the caller's applications.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.exceptions import DocumentNotFoundError, FileTooLargeError, ValidationError
from jobtracker.core.identity import AuthenticatedUser
from jobtracker.db.models import DocumentModel, DocumentType
from jobtracker.models.schemas import DocumentResponse, DocumentSummary, format_file_size
from jobtracker.repositories.documents import DocumentRepository
from jobtracker.services.application_service import ApplicationService
from jobtracker.services.file_storage import FileStorageService
from jobtracker.services.ownership import require_ownership

logger = logging.getLogger(__name__)

RECENT_DOCUMENTS = 5


class DocumentService:
    """Service for document CRUD and file handling."""

    def __init__(self, session: AsyncSession, storage: FileStorageService):
        self.session = session
        self.storage = storage
        self.documents = DocumentRepository(session)
        self.applications = ApplicationService(session)

    async def _get_owned(self, document_id: int, identity: AuthenticatedUser) -> DocumentModel:
        document = await self.documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        require_ownership(document, identity.id, "document")
        return document

    async def upload_document(
        self,
        identity: AuthenticatedUser,
        application_id: int,
        document_type: DocumentType,
        content: bytes,
        filename: Optional[str],
        content_type: Optional[str],
        description: Optional[str] = None,
    ) -> DocumentModel:
        """
        Store an upload and record it against one of the caller's applications.

        Steps:
        1. Validate type and size
        2. Check the application exists and is the caller's
        3. Write the bytes, then the metadata row

        Raises:
            ValidationError: Disallowed MIME type or empty file
            FileTooLargeError: Over the configured size limit
            ApplicationNotFoundError / ForbiddenError: Bad application id
        """
        if not self.storage.is_valid_file_type(content_type):
            raise ValidationError(f"File type not allowed: {content_type}")

        if not self.storage.is_valid_file_size(len(content)):
            raise FileTooLargeError(self.storage.max_file_size)

        application = await self.applications.get_owned(application_id, identity)

        stored = self.storage.store_file(
            content,
            filename,
            content_type,
            identity.id,
            application.id,
        )

        document = DocumentModel(
            application=application,
            document_type=document_type.value,
            file_name=stored.file_name,
            original_filename=stored.original_filename,
            file_path=stored.file_path,
            file_type=stored.file_type,
            file_size=stored.file_size,
            description=description,
        )
        try:
            await self.documents.save(document)
        except Exception:
            # Remove the bytes if the row can't be written
            self.storage.delete_file(stored.file_path)
            raise

        logger.info(f"User {identity.id} uploaded document {document.id} to application {application.id}")
        return document

    async def list_for_application(
        self,
        application_id: int,
        identity: AuthenticatedUser,
    ) -> list[DocumentModel]:
        application = await self.applications.get_owned(application_id, identity)
        return await self.documents.find_by_application(application.id)

    async def list_mine(self, identity: AuthenticatedUser) -> list[DocumentModel]:
        return await self.documents.find_by_owner(identity.id)

    async def get_document(self, document_id: int, identity: AuthenticatedUser) -> DocumentModel:
        return await self._get_owned(document_id, identity)

    async def get_download(
        self,
        document_id: int,
        identity: AuthenticatedUser,
    ) -> tuple[Path, DocumentModel]:
        """Resolve the stored file for a document the caller owns."""
        document = await self._get_owned(document_id, identity)
        path = self.storage.load_file(
            document.file_name,
            document.owner_id,
            document.application_id,
        )
        return path, document

    async def update_description(
        self,
        document_id: int,
        identity: AuthenticatedUser,
        description: Optional[str],
    ) -> DocumentModel:
        document = await self._get_owned(document_id, identity)
        document.description = description
        document.updated_at = datetime.now(timezone.utc)
        return await self.documents.save(document)

    async def delete_document(self, document_id: int, identity: AuthenticatedUser) -> None:
        """Remove the metadata row, then the stored file."""
        document = await self._get_owned(document_id, identity)
        file_path = document.file_path
        await self.documents.delete(document)
        self.storage.delete_file(file_path)
        logger.info(f"User {identity.id} deleted document {document_id}")

    async def get_summary(self, identity: AuthenticatedUser) -> DocumentSummary:
        """Storage usage overview across all of the caller's applications."""
        documents = await self.documents.find_by_owner(identity.id)
        total_storage = await self.documents.total_size_by_owner(identity.id)

        by_type = {doc_type.value: 0 for doc_type in DocumentType}
        for document in documents:
            by_type[document.document_type] = by_type.get(document.document_type, 0) + 1

        return DocumentSummary(
            totalDocuments=len(documents),
            totalStorageUsed=total_storage,
            totalStorageFormatted=format_file_size(total_storage),
            byType=by_type,
            recentDocuments=[
                DocumentResponse.from_model(d) for d in documents[:RECENT_DOCUMENTS]
            ],
        )
