"""
Job application ORM model.
"""

from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobtracker.db.database import Base
from jobtracker.db.models.base import TimestampMixin

if TYPE_CHECKING:
    from jobtracker.db.models.document import DocumentModel
    from jobtracker.db.models.interview import InterviewModel
    from jobtracker.db.models.user import UserModel


class ApplicationStatus(str, Enum):
    """Where an application currently stands."""

    APPLIED = "APPLIED"
    INTERVIEWING = "INTERVIEWING"
    OFFER_RECEIVED = "OFFER_RECEIVED"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"
    HIRED = "HIRED"


class ApplicationModel(TimestampMixin, Base):
    """A job application owned directly by one user."""

    __tablename__ = "applications"
    __table_args__ = (
        Index("idx_company_name", "company_name"),
        Index("idx_position_title", "position_title"),
        Index("idx_status", "status"),
        Index("idx_application_date", "application_date"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    company_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    position_title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    application_date: Mapped[date] = mapped_column(
        Date,
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    job_posting_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(
        "UserModel",
        back_populates="applications",
    )
    # Children load on demand; only delete cascades walk them
    interviews: Mapped[list["InterviewModel"]] = relationship(
        "InterviewModel",
        back_populates="application",
        cascade="all, delete-orphan",
        lazy="select",
    )
    documents: Mapped[list["DocumentModel"]] = relationship(
        "DocumentModel",
        back_populates="application",
        cascade="all, delete-orphan",
        lazy="select",
    )

    @property
    def owner_id(self) -> int:
        return self.user_id
