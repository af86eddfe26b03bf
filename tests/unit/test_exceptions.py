"""
Unit tests for custom exception classes.
Tests exception hierarchy, user messages, and status codes.
"""

import pytest

from jobtracker.core.exceptions import (
    ApplicationNotFoundError,
    DocumentNotFoundError,
    EmailAlreadyExistsError,
    FileStorageError,
    FileTooLargeError,
    ForbiddenError,
    InterviewNotFoundError,
    InvalidCredentialsError,
    InvalidTokenError,
    JobTrackerError,
    NotFoundError,
    StoredFileNotFoundError,
    UnauthenticatedError,
    ValidationError,
)


class TestJobTrackerError:
    """Tests for base JobTrackerError class."""

    def test_default_user_message(self):
        """Test JobTrackerError uses default user message when not provided."""
        error = JobTrackerError("Internal error details")

        assert str(error) == "Internal error details"
        assert error.user_message == "An unexpected error occurred"
        assert error.status_code == 500

    def test_custom_user_message(self):
        error = JobTrackerError("Internal details", user_message="Custom user message")

        assert str(error) == "Internal details"
        assert error.user_message == "Custom user message"

    def test_can_be_raised_and_caught(self):
        with pytest.raises(JobTrackerError) as exc_info:
            raise ForbiddenError("internal", user_message="user facing")

        assert exc_info.value.user_message == "user facing"


class TestStatusCodes:
    """Each domain error maps to exactly one HTTP status."""

    @pytest.mark.parametrize(
        "error, expected",
        [
            (ValidationError("bad"), 400),
            (InvalidCredentialsError(), 401),
            (UnauthenticatedError(), 401),
            (ForbiddenError("no"), 403),
            (ApplicationNotFoundError(1), 404),
            (InterviewNotFoundError(1), 404),
            (DocumentNotFoundError(1), 404),
            (StoredFileNotFoundError("x.pdf"), 404),
            (EmailAlreadyExistsError("a@example.com"), 409),
            (FileTooLargeError(10 * 1024 * 1024), 413),
            (FileStorageError("disk full"), 500),
        ],
    )
    def test_status_code(self, error, expected):
        assert error.status_code == expected


class TestUserMessages:
    """User-facing messages never leak internal detail."""

    def test_invalid_credentials_is_generic(self):
        error = InvalidCredentialsError("No user with email x@example.com")

        assert "x@example.com" in str(error)
        assert error.user_message == "Invalid email or password"

    def test_forbidden_default_message(self):
        error = ForbiddenError("User 2 does not own application 1")
        assert error.user_message == "Access denied"

    def test_not_found_messages_name_the_id(self):
        assert ApplicationNotFoundError(42).user_message == "Application with id 42 not found"
        assert InterviewNotFoundError(5).user_message == "Interview with id 5 not found"
        assert DocumentNotFoundError(9).user_message == "Document with id 9 not found"

    def test_not_found_subclasses(self):
        for error in (ApplicationNotFoundError(1), StoredFileNotFoundError("f")):
            assert isinstance(error, NotFoundError)

    def test_email_already_exists_names_email(self):
        error = EmailAlreadyExistsError("alice@example.com")
        assert error.user_message == "Email alice@example.com is already registered"

    def test_file_too_large_names_limit(self):
        error = FileTooLargeError(10 * 1024 * 1024)
        assert "10MB" in error.user_message

    def test_storage_error_hides_path(self):
        error = FileStorageError("Could not store file /var/uploads/x: disk full")
        assert "/var/uploads" not in error.user_message


class TestInvalidTokenError:
    def test_not_a_domain_error(self):
        """Token failures are internal and never mapped to a response."""
        assert not issubclass(InvalidTokenError, JobTrackerError)
