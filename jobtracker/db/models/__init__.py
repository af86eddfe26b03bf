"""
SQLAlchemy ORM models package.

Re-exports all models for convenient imports.
"""

from jobtracker.db.models.user import UserModel
from jobtracker.db.models.application import ApplicationModel, ApplicationStatus
from jobtracker.db.models.interview import (
    InterviewModel,
    InterviewStatus,
    InterviewFormat,
)
from jobtracker.db.models.document import DocumentModel, DocumentType

__all__ = [
    # User
    "UserModel",
    # Application
    "ApplicationModel",
    "ApplicationStatus",
    # Interview
    "InterviewModel",
    "InterviewStatus",
    "InterviewFormat",
    # Document
    "DocumentModel",
    "DocumentType",
]
