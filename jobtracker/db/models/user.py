"""
User model for authentication and ownership.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobtracker.core.identity import UserRole
from jobtracker.db.database import Base
from jobtracker.db.models.base import TimestampMixin

if TYPE_CHECKING:
    from jobtracker.db.models.application import ApplicationModel


class UserModel(TimestampMixin, Base):
    """User account. Owns applications, and through them interviews and documents."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    full_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String,
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=UserRole.USER.value,
    )

    # Relationships
    applications: Mapped[list["ApplicationModel"]] = relationship(
        "ApplicationModel",
        back_populates="user",
        cascade="all, delete-orphan",
        # Only walked by delete cascades
        lazy="select",
    )
