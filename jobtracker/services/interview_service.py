"""
Interview service. Ownership is always resolved through the parent application.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.exceptions import InterviewNotFoundError
from jobtracker.core.identity import AuthenticatedUser
from jobtracker.db.models import InterviewModel, InterviewStatus
from jobtracker.models.schemas import InterviewRequest, InterviewResponse, InterviewSummary
from jobtracker.repositories.interviews import InterviewRepository
from jobtracker.services.application_service import ApplicationService
from jobtracker.services.ownership import require_ownership

logger = logging.getLogger(__name__)

# Size of the upcoming/recent lists on the summary
SUMMARY_LIMIT = 5


def local_now() -> datetime:
    """Server wall-clock time, comparable with stored scheduled dates."""
    return datetime.now()


class InterviewService:
    """Operations on interviews attached to the caller's applications."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.interviews = InterviewRepository(session)
        self.applications = ApplicationService(session)

    async def _get_owned(self, interview_id: int, identity: AuthenticatedUser) -> InterviewModel:
        interview = await self.interviews.get(interview_id)
        if interview is None:
            raise InterviewNotFoundError(interview_id)
        require_ownership(interview, identity.id, "interview")
        return interview

    async def list_for_application(
        self,
        application_id: int,
        identity: AuthenticatedUser,
    ) -> list[InterviewModel]:
        application = await self.applications.get_owned(application_id, identity)
        return await self.interviews.find_by_application(application.id)

    async def get_interview(self, interview_id: int, identity: AuthenticatedUser) -> InterviewModel:
        return await self._get_owned(interview_id, identity)

    async def create_interview(
        self,
        identity: AuthenticatedUser,
        request: InterviewRequest,
    ) -> InterviewModel:
        """Attach a new interview to one of the caller's applications."""
        application = await self.applications.get_owned(request.applicationId, identity)

        interview = InterviewModel(
            application=application,
            round=request.round,
            scheduled_date=request.scheduledDate,
            status=request.status.value,
            interviewer_name=request.interviewerName,
            interviewer_role=request.interviewRole,
            format=request.format.value if request.format else None,
            location=request.location,
            notes=request.notes,
            feedback=request.feedback,
            rating=request.rating,
        )
        await self.interviews.save(interview)
        logger.info(f"User {identity.id} added interview {interview.id} to application {application.id}")
        return interview

    async def update_interview(
        self,
        interview_id: int,
        identity: AuthenticatedUser,
        request: InterviewRequest,
    ) -> InterviewModel:
        """Update an interview. request.applicationId is ignored: an interview never moves."""
        interview = await self._get_owned(interview_id, identity)

        interview.round = request.round
        interview.scheduled_date = request.scheduledDate
        interview.status = request.status.value
        interview.interviewer_name = request.interviewerName
        interview.interviewer_role = request.interviewRole
        interview.format = request.format.value if request.format else None
        interview.location = request.location
        interview.notes = request.notes
        interview.feedback = request.feedback
        interview.rating = request.rating
        interview.updated_at = datetime.now(timezone.utc)

        return await self.interviews.save(interview)

    async def delete_interview(self, interview_id: int, identity: AuthenticatedUser) -> None:
        interview = await self._get_owned(interview_id, identity)
        await self.interviews.delete(interview)
        logger.info(f"User {identity.id} deleted interview {interview_id}")

    async def get_upcoming(self, identity: AuthenticatedUser) -> list[InterviewModel]:
        return await self.interviews.find_upcoming_by_owner(identity.id, local_now())

    async def get_past(self, identity: AuthenticatedUser) -> list[InterviewModel]:
        return await self.interviews.find_past_by_owner(identity.id, local_now())

    async def get_summary(self, identity: AuthenticatedUser) -> InterviewSummary:
        """Counts per status plus the next and most recent few interviews."""
        now = local_now()
        counts = await self.interviews.count_by_owner_grouped_by_status(identity.id)
        upcoming = await self.interviews.find_upcoming_by_owner(identity.id, now, SUMMARY_LIMIT)
        recent = await self.interviews.find_past_by_owner(identity.id, now, SUMMARY_LIMIT)

        return InterviewSummary(
            totalInterviews=sum(counts.get(status.value, 0) for status in InterviewStatus),
            scheduled=counts.get(InterviewStatus.SCHEDULED.value, 0),
            completed=counts.get(InterviewStatus.COMPLETED.value, 0),
            cancelled=counts.get(InterviewStatus.CANCELLED.value, 0),
            upcomingInterviews=[InterviewResponse.from_model(i) for i in upcoming],
            recentInterviews=[InterviewResponse.from_model(i) for i in recent],
        )
