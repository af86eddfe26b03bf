"""
Interview store. Owner-scoped queries join through the parent application.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.db.models import ApplicationModel, InterviewModel, InterviewStatus


class InterviewRepository:
    """Queries over interviews."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _owned_by(self, owner_id: int):
        return (
            select(InterviewModel)
            .join(InterviewModel.application)
            .where(ApplicationModel.user_id == owner_id)
        )

    async def get(self, interview_id: int) -> Optional[InterviewModel]:
        """Unscoped lookup. Callers must run the ownership check."""
        return await self.session.get(InterviewModel, interview_id)

    async def find_by_application(self, application_id: int) -> list[InterviewModel]:
        """Interviews for one application, soonest first."""
        result = await self.session.execute(
            select(InterviewModel)
            .where(InterviewModel.application_id == application_id)
            .order_by(InterviewModel.scheduled_date.asc())
        )
        return list(result.scalars().unique().all())

    async def find_upcoming_by_owner(
        self,
        owner_id: int,
        now: datetime,
        limit: Optional[int] = None,
    ) -> list[InterviewModel]:
        """Scheduled interviews after `now`, soonest first."""
        query = (
            self._owned_by(owner_id)
            .where(InterviewModel.status == InterviewStatus.SCHEDULED.value)
            .where(InterviewModel.scheduled_date > now)
            .order_by(InterviewModel.scheduled_date.asc())
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def find_past_by_owner(
        self,
        owner_id: int,
        now: datetime,
        limit: Optional[int] = None,
    ) -> list[InterviewModel]:
        """Interviews before `now` regardless of status, most recent first."""
        query = (
            self._owned_by(owner_id)
            .where(InterviewModel.scheduled_date < now)
            .order_by(InterviewModel.scheduled_date.desc())
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().unique().all())

    async def count_by_owner_grouped_by_status(self, owner_id: int) -> dict[str, int]:
        result = await self.session.execute(
            select(InterviewModel.status, func.count(InterviewModel.id))
            .join(InterviewModel.application)
            .where(ApplicationModel.user_id == owner_id)
            .group_by(InterviewModel.status)
        )
        return {status: count for status, count in result.all()}

    async def save(self, interview: InterviewModel) -> InterviewModel:
        self.session.add(interview)
        await self.session.flush()
        return interview

    async def delete(self, interview: InterviewModel) -> None:
        await self.session.delete(interview)
        await self.session.flush()
