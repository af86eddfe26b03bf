"""
Credential store: persistence for user accounts.
"""

from typing import Optional

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.db.models import UserModel


class UserRepository:
    """Lookup and persistence of users by email or id."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_email(self, email: str) -> Optional[UserModel]:
        """Get user by email (the login identifier)."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email is already registered."""
        result = await self.session.execute(
            select(exists().where(UserModel.email == email))
        )
        return bool(result.scalar())

    async def get(self, user_id: int) -> Optional[UserModel]:
        """Get user by ID."""
        return await self.session.get(UserModel, user_id)

    async def save(self, user: UserModel) -> UserModel:
        """Persist a user. The id is assigned on first insert."""
        self.session.add(user)
        await self.session.flush()
        return user
