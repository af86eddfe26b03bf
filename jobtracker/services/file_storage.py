"""
File-system storage for uploaded documents.

Layout: <upload_dir>/user_<user_id>/app_<application_id>/<uuid>_<millis>.<ext>
"""

import logging
import os
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from jobtracker.config import settings
from jobtracker.core.exceptions import FileStorageError, StoredFileNotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class StoredFile:
    """Result of writing an upload to disk."""

    file_name: str
    original_filename: str
    file_path: str
    file_size: int
    file_type: str


def clean_filename(filename: str | None) -> str:
    """Normalise a client-supplied file name, rejecting path traversal."""
    name = (filename or "unknown").replace("\\", "/")
    if ".." in name:
        raise ValidationError(f"Filename contains invalid path sequence: {filename}")
    return os.path.basename(os.path.normpath(name)) or "unknown"


def get_file_extension(filename: str) -> str:
    """Extension without the dot; "bin" when there is none."""
    last_dot = filename.rfind(".")
    if last_dot > 0:
        return filename[last_dot + 1:]
    return "bin"


class FileStorageService:
    """Stores, loads and removes document bytes on the local file system."""

    def __init__(
        self,
        upload_dir: str,
        max_file_size: int,
        allowed_types: list[str],
    ):
        self.root = Path(upload_dir).resolve()
        self.max_file_size = max_file_size
        self.allowed_types = set(allowed_types)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileStorageError(
                f"Could not create the upload directory {self.root}: {e}"
            ) from e

    def _application_dir(self, user_id: int, application_id: int) -> Path:
        return self.root / f"user_{user_id}" / f"app_{application_id}"

    def is_valid_file_type(self, content_type: str | None) -> bool:
        return content_type in self.allowed_types

    def is_valid_file_size(self, size: int) -> bool:
        return size <= self.max_file_size

    def store_file(
        self,
        content: bytes,
        filename: str | None,
        content_type: str | None,
        user_id: int,
        application_id: int,
    ) -> StoredFile:
        """
        Write an upload under the owner's application directory.

        Args:
            content: Raw file bytes
            filename: Name supplied by the client
            content_type: MIME type supplied by the client
            user_id: Owner of the application
            application_id: Application the file is attached to

        Returns:
            StoredFile describing where the bytes ended up

        Raises:
            ValidationError: Empty file or unsafe file name
            FileStorageError: The write failed
        """
        if not content:
            raise ValidationError("Failed to store the empty file.")

        original_filename = clean_filename(filename)
        extension = get_file_extension(original_filename)
        unique_name = f"{uuid4()}_{int(time.time() * 1000)}.{extension}"

        target_dir = self._application_dir(user_id, application_id)
        target = target_dir / unique_name
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            with open(target, "wb") as buffer:
                buffer.write(content)
        except OSError as e:
            raise FileStorageError(f"Could not store file {original_filename}: {e}") from e

        logger.info(f"Stored {len(content)} bytes at {target}")
        return StoredFile(
            file_name=unique_name,
            original_filename=original_filename,
            file_path=str(target),
            file_size=len(content),
            file_type=content_type or "application/octet-stream",
        )

    def load_file(self, file_name: str, user_id: int, application_id: int) -> Path:
        """
        Resolve a stored file for download.

        Raises:
            StoredFileNotFoundError: The file is missing or resolves outside its directory
        """
        app_dir = self._application_dir(user_id, application_id)
        path = (app_dir / file_name).resolve()
        if path.parent != app_dir.resolve() or not path.is_file():
            raise StoredFileNotFoundError(file_name)
        return path

    def delete_file(self, file_path: str) -> bool:
        """Remove one stored file. Returns False when it was already gone."""
        try:
            os.remove(file_path)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FileStorageError(f"Could not delete file {file_path}: {e}") from e
        logger.info(f"Deleted stored file {file_path}")
        return True

    def delete_application_files(self, user_id: int, application_id: int) -> None:
        """Remove every stored file of one application."""
        app_dir = self._application_dir(user_id, application_id)
        if app_dir.exists():
            shutil.rmtree(app_dir)
            logger.info(f"Removed upload directory {app_dir}")


def get_file_storage() -> FileStorageService:
    """Storage service configured from settings."""
    return FileStorageService(
        upload_dir=settings.upload_dir,
        max_file_size=settings.max_file_size,
        allowed_types=settings.allowed_file_types,
    )
