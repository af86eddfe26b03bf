"""
Authentication service: registration and login.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.auth import TokenService, dummy_verify, hash_password, verify_password
from jobtracker.core.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from jobtracker.core.identity import UserRole, role_name
from jobtracker.db.models import UserModel
from jobtracker.repositories.users import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """A freshly issued token and the user it belongs to."""

    token: str
    id: int
    email: str
    full_name: str
    role: str


class AuthService:
    """Turns credentials into sessions."""

    def __init__(self, session: AsyncSession, tokens: TokenService):
        self.session = session
        self.users = UserRepository(session)
        self.tokens = tokens

    def _result(self, user: UserModel) -> AuthResult:
        return AuthResult(
            token=self.tokens.issue(user.email),
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=role_name(user.role),
        )

    async def register(self, full_name: str, email: str, password: str) -> AuthResult:
        """
        Register a new user and log them in.

        Args:
            full_name: Display name
            email: Login identifier, must be unused
            password: Plain text password (hashed before storage)

        Returns:
            AuthResult with a token for the new account

        Raises:
            EmailAlreadyExistsError: If the email is taken
        """
        if await self.users.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = UserModel(
            email=email,
            full_name=full_name,
            password_hash=hash_password(password),
            role=UserRole.USER.value,
        )
        try:
            # A concurrent registration can still win the unique index
            await self.users.save(user)
        except IntegrityError as e:
            raise EmailAlreadyExistsError(email) from e

        logger.info(f"Registered user {user.id} ({email})")
        return self._result(user)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Authenticate with email and password.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password (indistinguishable)
        """
        user = await self.users.find_by_email(email)

        if user is None:
            dummy_verify()
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError(f"No user with email {email}")

        if not verify_password(password, user.password_hash):
            logger.info(f"Login failed for user {user.id}: wrong password")
            raise InvalidCredentialsError(f"Wrong password for user {user.id}")

        logger.info(f"User {user.id} logged in")
        return self._result(user)
