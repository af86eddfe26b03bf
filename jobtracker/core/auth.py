"""
JWT and password utilities.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from jobtracker.config import settings
from jobtracker.core.exceptions import InvalidTokenError

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# HMAC-SHA256 needs at least a 256-bit key
MIN_SECRET_BYTES = 32

BEARER_PREFIX = "Bearer "


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend one bcrypt verify against a throwaway hash."""
    pwd_context.dummy_verify()


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the raw token out of an Authorization header value.

    Only the literal "Bearer " prefix is accepted. Anything else yields None.
    """
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):] or None
    return None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and validates signed, time-bound session tokens."""

    def __init__(
        self,
        secret: str,
        expiration_ms: int,
        algorithm: str = "HS256",
        clock: Callable[[], datetime] = _utcnow,
    ):
        key = secret.encode("utf-8")
        if len(key) < MIN_SECRET_BYTES:
            raise ValueError(
                f"JWT secret must be at least {MIN_SECRET_BYTES} bytes, got {len(key)}"
            )
        # Derived once, reused for every sign/verify
        self._key = key
        self.algorithm = algorithm
        self.lifetime = timedelta(milliseconds=expiration_ms)
        self._clock = clock

    def issue(self, subject: str) -> str:
        """
        Create a token for the given subject (the user's email).

        Args:
            subject: Email to embed as the `sub` claim

        Returns:
            Encoded JWT
        """
        now = self._clock()
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._key, algorithm=self.algorithm)

    def _claims(self, token: str) -> dict:
        try:
            claims = jwt.decode(
                token,
                self._key,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        if not isinstance(claims.get("sub"), str) or not isinstance(claims.get("exp"), int):
            raise InvalidTokenError("Token is missing required claims")
        return claims

    def get_subject(self, token: str) -> str:
        """
        Return the email embedded in a token.

        The signature is verified first. Expiry is not checked here; see is_valid.

        Raises:
            InvalidTokenError: malformed token or signature mismatch
        """
        return self._claims(token)["sub"]

    def is_valid(self, token: str, expected_subject: str) -> bool:
        """True iff the subject matches and the token has not yet expired."""
        try:
            claims = self._claims(token)
        except InvalidTokenError:
            return False

        expires_at = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
        return claims["sub"] == expected_subject and self._clock() < expires_at


@lru_cache()
def get_token_service() -> TokenService:
    """Process-wide token service built from settings."""
    return TokenService(
        secret=settings.jwt_secret_key,
        expiration_ms=settings.jwt_expiration_ms,
        algorithm=settings.jwt_algorithm,
    )
