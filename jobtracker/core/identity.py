"""
Authenticated caller identity and role representations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jobtracker.db.models.user import UserModel


class UserRole(str, Enum):
    """Roles that determine what a user is allowed to do."""

    USER = "USER"
    ADMIN = "ADMIN"


# Role as exposed in API payloads
ROLE_NAMES: dict[UserRole, str] = {
    UserRole.USER: "USER",
    UserRole.ADMIN: "ADMIN",
}

# Role as used in authority checks
ROLE_AUTHORITIES: dict[UserRole, str] = {
    UserRole.USER: "ROLE_USER",
    UserRole.ADMIN: "ROLE_ADMIN",
}


def role_name(role: UserRole | str) -> str:
    """External (bare) name for a role."""
    return ROLE_NAMES[UserRole(role)]


def role_authority(role: UserRole | str) -> str:
    """Prefixed authority string for a role."""
    return ROLE_AUTHORITIES[UserRole(role)]


@dataclass(frozen=True)
class AuthenticatedUser:
    """Who is calling. Built once per request and passed down explicitly."""

    id: int
    email: str
    full_name: str
    role: UserRole
    authority: str


def to_authenticated_user(user: "UserModel") -> AuthenticatedUser:
    """Map a stored user onto the identity the request pipeline carries."""
    role = UserRole(user.role)
    return AuthenticatedUser(
        id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=role,
        authority=role_authority(role),
    )
