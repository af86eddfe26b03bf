"""
Resource ownership checks shared by applications, interviews and documents.
"""

import logging
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.exceptions import ForbiddenError
from jobtracker.core.identity import AuthenticatedUser
from jobtracker.db.models import UserModel
from jobtracker.repositories.users import UserRepository

logger = logging.getLogger(__name__)


class OwnedResource(Protocol):
    """Anything whose owning user id can be resolved."""

    id: int

    @property
    def owner_id(self) -> int: ...


def require_ownership(resource: OwnedResource, caller_id: int, kind: str) -> None:
    """
    Raise ForbiddenError unless the caller owns the resource.

    Args:
        resource: Application, interview or document
        caller_id: Authenticated user's id
        kind: Resource name used in the error message
    """
    if resource.owner_id != caller_id:
        logger.info(f"User {caller_id} denied access to {kind} {resource.id}")
        raise ForbiddenError(
            f"User {caller_id} does not own {kind} {resource.id}",
            f"You don't have access to this {kind}",
        )


async def resolve_current_user(
    session: AsyncSession,
    identity: AuthenticatedUser,
) -> UserModel:
    """
    Re-fetch the full user row for an authenticated identity.

    A principal whose row has vanished is a permission failure, not a 404.
    """
    user = await UserRepository(session).get(identity.id)
    if user is None:
        raise ForbiddenError(f"Authenticated user {identity.id} no longer exists")
    return user
