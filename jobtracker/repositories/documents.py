"""
Document store. Owner-scoped queries join through the parent application.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.db.models import ApplicationModel, DocumentModel


class DocumentRepository:
    """Queries over uploaded document metadata."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, document_id: int) -> Optional[DocumentModel]:
        """Unscoped lookup. Callers must run the ownership check."""
        return await self.session.get(DocumentModel, document_id)

    async def find_by_application(self, application_id: int) -> list[DocumentModel]:
        """Documents for one application, newest uploads first."""
        result = await self.session.execute(
            select(DocumentModel)
            .where(DocumentModel.application_id == application_id)
            .order_by(DocumentModel.uploaded_at.desc(), DocumentModel.id.desc())
        )
        return list(result.scalars().unique().all())

    async def find_by_owner(self, owner_id: int) -> list[DocumentModel]:
        """Every document across the owner's applications, newest first."""
        result = await self.session.execute(
            select(DocumentModel)
            .join(DocumentModel.application)
            .where(ApplicationModel.user_id == owner_id)
            .order_by(DocumentModel.uploaded_at.desc(), DocumentModel.id.desc())
        )
        return list(result.scalars().unique().all())

    async def total_size_by_owner(self, owner_id: int) -> int:
        """Bytes used by the owner's documents (0 when there are none)."""
        result = await self.session.execute(
            select(func.coalesce(func.sum(DocumentModel.file_size), 0))
            .join(DocumentModel.application)
            .where(ApplicationModel.user_id == owner_id)
        )
        return int(result.scalar() or 0)

    async def save(self, document: DocumentModel) -> DocumentModel:
        self.session.add(document)
        await self.session.flush()
        return document

    async def delete(self, document: DocumentModel) -> None:
        await self.session.delete(document)
        await self.session.flush()
