"""
API route dependencies.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.auth import TokenService, extract_bearer_token, get_token_service
from jobtracker.core.exceptions import ForbiddenError, InvalidTokenError, UnauthenticatedError
from jobtracker.core.identity import AuthenticatedUser, to_authenticated_user
from jobtracker.db.database import get_db_session
from jobtracker.repositories.users import UserRepository
from jobtracker.services.file_storage import FileStorageService, get_file_storage

logger = logging.getLogger(__name__)


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
FileStorageDep = Annotated[FileStorageService, Depends(get_file_storage)]


async def resolve_identity(
    request: Request,
    session: SessionDep,
    tokens: TokenServiceDep,
) -> Optional[AuthenticatedUser]:
    """
    Resolve the bearer token on this request into a caller identity.

    Runs before every /api handler. It never rejects a request: it only
    records what it found on request.state so that require_identity can
    decide later.

    request.state.identity      AuthenticatedUser, or None
    request.state.orphaned      True when the token was good but its user is gone
    """
    request.state.identity = None
    request.state.orphaned = False

    token = extract_bearer_token(request.headers.get("Authorization"))
    if token is None:
        return None

    try:
        email = tokens.get_subject(token)
    except InvalidTokenError as e:
        logger.warning(f"Cannot set user authentication: {e}")
        return None

    user = await UserRepository(session).find_by_email(email)
    if user is None:
        request.state.orphaned = tokens.is_valid(token, email)
        return None

    if not tokens.is_valid(token, user.email):
        logger.info(f"Rejected token for user {user.id}")
        return None

    identity = to_authenticated_user(user)
    request.state.identity = identity
    return identity


async def require_identity(
    request: Request,
    identity: Annotated[Optional[AuthenticatedUser], Depends(resolve_identity)],
) -> AuthenticatedUser:
    """
    Dependency to get the current authenticated user.

    Missing, malformed or expired tokens are 401. A valid token whose
    account no longer exists is 403.
    """
    if identity is not None:
        return identity

    if request.state.orphaned:
        raise ForbiddenError("Token subject no longer exists")

    raise UnauthenticatedError()


# Dependency annotations
CurrentUserDep = Annotated[AuthenticatedUser, Depends(require_identity)]
