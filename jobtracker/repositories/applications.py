"""
Application store. Every "my applications" query filters on the owner in SQL.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.db.models import ApplicationModel, ApplicationStatus


class ApplicationRepository:
    """Queries over job applications."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, application_id: int) -> Optional[ApplicationModel]:
        """Unscoped lookup. Callers must run the ownership check."""
        return await self.session.get(ApplicationModel, application_id)

    async def find_by_owner(
        self,
        owner_id: int,
        status: Optional[ApplicationStatus] = None,
    ) -> list[ApplicationModel]:
        """Owner's applications, newest application date first."""
        query = select(ApplicationModel).where(ApplicationModel.user_id == owner_id)
        if status is not None:
            query = query.where(ApplicationModel.status == status.value)
        query = query.order_by(
            ApplicationModel.application_date.desc(),
            ApplicationModel.id.desc(),
        )

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def search_by_owner_and_company(
        self,
        owner_id: int,
        company: str,
    ) -> list[ApplicationModel]:
        """Case-insensitive substring match on company name. % and _ match literally."""
        result = await self.session.execute(
            select(ApplicationModel)
            .where(ApplicationModel.user_id == owner_id)
            .where(ApplicationModel.company_name.icontains(company, autoescape=True))
            .order_by(ApplicationModel.application_date.desc())
        )
        return list(result.scalars().all())

    async def count_by_owner_grouped_by_status(self, owner_id: int) -> dict[str, int]:
        """Number of the owner's applications per stored status value."""
        result = await self.session.execute(
            select(ApplicationModel.status, func.count(ApplicationModel.id))
            .where(ApplicationModel.user_id == owner_id)
            .group_by(ApplicationModel.status)
        )
        return {status: count for status, count in result.all()}

    async def save(self, application: ApplicationModel) -> ApplicationModel:
        self.session.add(application)
        await self.session.flush()
        return application

    async def delete(self, application: ApplicationModel) -> None:
        await self.session.delete(application)
        await self.session.flush()
