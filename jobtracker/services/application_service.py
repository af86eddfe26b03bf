"""
Application service: CRUD, search and statistics scoped to the caller.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.exceptions import ApplicationNotFoundError
from jobtracker.core.identity import AuthenticatedUser
from jobtracker.db.models import ApplicationModel, ApplicationStatus
from jobtracker.models.schemas import ApplicationRequest, ApplicationStatistics
from jobtracker.repositories.applications import ApplicationRepository
from jobtracker.services.file_storage import FileStorageService
from jobtracker.services.ownership import require_ownership, resolve_current_user

logger = logging.getLogger(__name__)


class ApplicationService:
    """Operations on the caller's job applications."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.applications = ApplicationRepository(session)

    async def get_owned(
        self,
        application_id: int,
        identity: AuthenticatedUser,
    ) -> ApplicationModel:
        """
        Load an application the caller owns.

        Raises:
            ApplicationNotFoundError: No such id
            ForbiddenError: It belongs to someone else
        """
        application = await self.applications.get(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        require_ownership(application, identity.id, "application")
        return application

    async def list_applications(
        self,
        identity: AuthenticatedUser,
        status: Optional[ApplicationStatus] = None,
    ) -> list[ApplicationModel]:
        return await self.applications.find_by_owner(identity.id, status)

    async def search_by_company(
        self,
        identity: AuthenticatedUser,
        company: str,
    ) -> list[ApplicationModel]:
        return await self.applications.search_by_owner_and_company(identity.id, company)

    async def create_application(
        self,
        identity: AuthenticatedUser,
        request: ApplicationRequest,
    ) -> ApplicationModel:
        """Create an application owned by the caller."""
        owner = await resolve_current_user(self.session, identity)

        application = ApplicationModel(
            user_id=owner.id,
            company_name=request.companyName,
            position_title=request.positionTitle,
            application_date=request.applicationDate,
            status=request.status.value,
            job_posting_url=request.jobUrl,
            notes=request.notes,
        )
        await self.applications.save(application)
        logger.info(f"User {owner.id} created application {application.id}")
        return application

    async def update_application(
        self,
        application_id: int,
        identity: AuthenticatedUser,
        request: ApplicationRequest,
    ) -> ApplicationModel:
        """Replace the editable fields. The owner never changes."""
        application = await self.get_owned(application_id, identity)

        application.company_name = request.companyName
        application.position_title = request.positionTitle
        application.application_date = request.applicationDate
        application.status = request.status.value
        application.job_posting_url = request.jobUrl
        application.notes = request.notes
        application.updated_at = datetime.now(timezone.utc)

        return await self.applications.save(application)

    async def delete_application(
        self,
        application_id: int,
        identity: AuthenticatedUser,
        storage: FileStorageService,
    ) -> None:
        """Delete an application with its interviews, documents and stored files."""
        application = await self.get_owned(application_id, identity)
        owner_id = application.user_id

        await self.applications.delete(application)
        storage.delete_application_files(owner_id, application_id)
        logger.info(f"User {owner_id} deleted application {application_id}")

    async def get_statistics(self, identity: AuthenticatedUser) -> ApplicationStatistics:
        """Total and per-status counts, every status present (zero if unused)."""
        counts = await self.applications.count_by_owner_grouped_by_status(identity.id)
        status_counts = {status.value: counts.get(status.value, 0) for status in ApplicationStatus}

        return ApplicationStatistics(
            totalApplications=sum(status_counts.values()),
            statusCounts=status_counts,
        )
