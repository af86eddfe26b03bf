"""Custom exceptions for the job tracker.

Every domain error carries two messages:
- an internal message for logs
- a user_message that is safe to put in a response body

They are raised where the condition is detected and translated to HTTP
responses in one place (jobtracker.api.errors).
"""


class JobTrackerError(Exception):
    """Base exception for job tracker errors."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str, user_message: str | None = None):
        """
        Initialize job tracker error.

        Args:
            message: Internal error message for logging/debugging
            user_message: Safe message to show to users (defaults to generic message)
        """
        super().__init__(message)
        self.user_message = user_message or "An unexpected error occurred"


class ValidationError(JobTrackerError):
    """Request data failed validation outside of schema parsing."""

    status_code = 400
    error = "Validation Failed"

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or message)


class InvalidCredentialsError(JobTrackerError):
    """Login failed. Never says whether the email or the password was wrong."""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, "Invalid email or password")


class UnauthenticatedError(JobTrackerError):
    """A protected endpoint was called without a usable bearer token."""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "Authentication required")


class ForbiddenError(JobTrackerError):
    """Caller is authenticated but may not touch this resource."""

    status_code = 403
    error = "Forbidden"

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or "Access denied")


class NotFoundError(JobTrackerError):
    """Requested record does not exist at all."""

    status_code = 404
    error = "Not Found"

    def __init__(self, message: str, user_message: str | None = None):
        super().__init__(message, user_message or message)


class ApplicationNotFoundError(NotFoundError):
    def __init__(self, application_id: int):
        super().__init__(f"Application with id {application_id} not found")


class InterviewNotFoundError(NotFoundError):
    def __init__(self, interview_id: int):
        super().__init__(f"Interview with id {interview_id} not found")


class DocumentNotFoundError(NotFoundError):
    def __init__(self, document_id: int):
        super().__init__(f"Document with id {document_id} not found")


class StoredFileNotFoundError(NotFoundError):
    """Document row exists but its bytes are missing from storage."""

    def __init__(self, file_name: str):
        super().__init__(f"File not found: {file_name}", "File not found")


class EmailAlreadyExistsError(JobTrackerError):
    """Registration attempted with an email that is already taken."""

    status_code = 409
    error = "Conflict"

    def __init__(self, email: str):
        message = f"Email {email} is already registered"
        super().__init__(message, message)


class FileTooLargeError(JobTrackerError):
    """Uploaded file exceeds the configured size limit."""

    status_code = 413
    error = "Payload Too Large"

    def __init__(self, max_size: int):
        message = f"File size exceeds maximum allowed size ({max_size // (1024 * 1024)}MB)"
        super().__init__(message, message)


class FileStorageError(JobTrackerError):
    """Writing or deleting bytes on disk failed."""

    def __init__(self, message: str):
        super().__init__(message, "Could not store file. Please try again.")


class InvalidTokenError(Exception):
    """Token is malformed or its signature does not verify.

    Internal only: identity resolution swallows it and the request continues
    unauthenticated, so it never reaches the HTTP error boundary.
    """
