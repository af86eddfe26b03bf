"""
Pydantic schemas for API request/response validation.
"""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from jobtracker.db.models import (
    ApplicationModel,
    ApplicationStatus,
    DocumentModel,
    DocumentType,
    InterviewFormat,
    InterviewModel,
    InterviewStatus,
)


def format_file_size(size: int) -> str:
    """Human readable byte count (B / KB / MB / GB)."""
    kb = size / 1024
    mb = kb / 1024
    gb = mb / 1024
    if gb >= 1:
        return f"{gb:.2f} GB"
    if mb >= 1:
        return f"{mb:.2f} MB"
    if kb >= 1:
        return f"{kb:.2f} KB"
    return f"{size} B"


# ============ Auth Schemas ============

class RegisterRequest(BaseModel):
    """Registration request."""

    fullName: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Minimum 6 characters")

    @field_validator("fullName")
    @classmethod
    def full_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Name must be between 2 and 100 characters")
        return value


class LoginRequest(BaseModel):
    """Login request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(BaseModel):
    """Token plus the user summary the frontend stores."""

    token: str
    type: str = "Bearer"
    id: int
    email: str
    fullName: str
    role: str


class CurrentUserResponse(BaseModel):
    """Display info for the authenticated caller."""

    message: str
    id: int
    email: str
    fullName: str
    role: str
    authorities: List[str]


# ============ Application Schemas ============

class ApplicationRequest(BaseModel):
    """Create/update payload for an application."""

    model_config = ConfigDict(str_strip_whitespace=True)

    companyName: str = Field(..., min_length=1, max_length=255)
    positionTitle: str = Field(..., min_length=1, max_length=255)
    applicationDate: date
    status: ApplicationStatus
    jobUrl: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None


class ApplicationResponse(BaseModel):
    """Application as returned to the owner."""

    id: int
    companyName: str
    positionTitle: str
    applicationDate: date
    status: ApplicationStatus
    jobUrl: Optional[str]
    notes: Optional[str]
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_model(cls, application: ApplicationModel) -> "ApplicationResponse":
        return cls(
            id=application.id,
            companyName=application.company_name,
            positionTitle=application.position_title,
            applicationDate=application.application_date,
            status=application.status,
            jobUrl=application.job_posting_url,
            notes=application.notes,
            createdAt=application.created_at,
            updatedAt=application.updated_at,
        )


class ApplicationStatistics(BaseModel):
    """Counts of the caller's applications."""

    totalApplications: int
    statusCounts: Dict[str, int]


# ============ Interview Schemas ============

class InterviewRequest(BaseModel):
    """Create/update payload for an interview."""

    model_config = ConfigDict(str_strip_whitespace=True)

    applicationId: int
    round: str = Field(..., min_length=1, max_length=100)
    scheduledDate: datetime
    status: InterviewStatus
    interviewerName: Optional[str] = Field(None, max_length=100)
    interviewRole: Optional[str] = Field(None, max_length=100)
    format: Optional[InterviewFormat] = None
    location: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None
    feedback: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)

    @field_validator("scheduledDate")
    @classmethod
    def to_local_wall_clock(cls, value: datetime) -> datetime:
        # Stored without timezone, in server local time
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class InterviewResponse(BaseModel):
    """Interview with denormalised application context."""

    id: int
    applicationId: int
    applicationCompany: str
    applicationPosition: str
    round: str
    scheduledDate: datetime
    status: InterviewStatus
    interviewerName: Optional[str]
    interviewRole: Optional[str]
    format: Optional[InterviewFormat]
    location: Optional[str]
    notes: Optional[str]
    feedback: Optional[str]
    rating: Optional[int]
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_model(cls, interview: InterviewModel) -> "InterviewResponse":
        return cls(
            id=interview.id,
            applicationId=interview.application_id,
            applicationCompany=interview.application.company_name,
            applicationPosition=interview.application.position_title,
            round=interview.round,
            scheduledDate=interview.scheduled_date,
            status=interview.status,
            interviewerName=interview.interviewer_name,
            interviewRole=interview.interviewer_role,
            format=interview.format,
            location=interview.location,
            notes=interview.notes,
            feedback=interview.feedback,
            rating=interview.rating,
            createdAt=interview.created_at,
            updatedAt=interview.updated_at,
        )


class InterviewSummary(BaseModel):
    """Dashboard counts plus the next and most recent interviews."""

    totalInterviews: int
    scheduled: int
    completed: int
    cancelled: int
    upcomingInterviews: List[InterviewResponse]
    recentInterviews: List[InterviewResponse]


# ============ Document Schemas ============

class DocumentUpdateRequest(BaseModel):
    """Only the description of a document is editable."""

    description: Optional[str] = Field(None, max_length=500)


class DocumentResponse(BaseModel):
    """Document metadata with a ready-made download link."""

    id: int
    applicationId: int
    applicationCompany: str
    documentType: DocumentType
    fileName: str
    originalFilename: str
    fileType: str
    fileSize: int
    fileSizeFormatted: str
    description: Optional[str]
    uploadedAt: datetime
    downloadUrl: str

    @classmethod
    def from_model(cls, document: DocumentModel) -> "DocumentResponse":
        return cls(
            id=document.id,
            applicationId=document.application_id,
            applicationCompany=document.application.company_name,
            documentType=document.document_type,
            fileName=document.file_name,
            originalFilename=document.original_filename,
            fileType=document.file_type,
            fileSize=document.file_size,
            fileSizeFormatted=format_file_size(document.file_size),
            description=document.description,
            uploadedAt=document.uploaded_at,
            downloadUrl=f"/api/documents/{document.id}/download",
        )


class DocumentSummary(BaseModel):
    """Storage usage overview for the caller."""

    totalDocuments: int
    totalStorageUsed: int
    totalStorageFormatted: str
    byType: Dict[str, int]
    recentDocuments: List[DocumentResponse]


# ============ Error Schema ============

class ErrorResponse(BaseModel):
    """Body of every error response."""

    timestamp: datetime
    status: int
    error: str
    message: str
    errors: Optional[Dict[str, str]] = None
