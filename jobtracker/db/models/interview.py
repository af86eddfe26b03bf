"""
Interview ORM model.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobtracker.db.database import Base
from jobtracker.db.models.base import TimestampMixin

if TYPE_CHECKING:
    from jobtracker.db.models.application import ApplicationModel


class InterviewStatus(str, Enum):
    """Where the interview process currently stands."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class InterviewFormat(str, Enum):
    """How the interview is conducted."""

    IN_PERSON = "IN_PERSON"
    VIDEO_CALL = "VIDEO_CALL"
    PHONE_CALL = "PHONE_CALL"
    ASSESSMENT = "ASSESSMENT"


class InterviewModel(TimestampMixin, Base):
    """A single interview round attached to an application."""

    __tablename__ = "interviews"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    application_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("applications.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    round: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    # Wall-clock time as entered by the user, no timezone
    scheduled_date: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    interviewer_name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )
    interviewer_role: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )
    format: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    location: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    feedback: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    rating: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )

    # Relationships
    application: Mapped["ApplicationModel"] = relationship(
        "ApplicationModel",
        back_populates="interviews",
        lazy="joined",
    )

    @property
    def owner_id(self) -> int:
        # Ownership is never stored on the interview itself
        return self.application.user_id
