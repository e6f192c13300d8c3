"""Local disk storage for uploaded album images."""
from pathlib import Path
from typing import BinaryIO, List, Tuple
import os
import random
import shutil
import time
import logging

logger = logging.getLogger(__name__)


class LocalStorageError(Exception):
    """Raised when a file cannot be written or removed."""
    pass


class LocalStorage:
    """Stores uploads in one directory and serves them under a URL prefix."""

    def __init__(self, upload_dir: str, url_prefix: str = "/uploads"):
        """
        Initialize storage, creating the upload directory if needed.

        Args:
            upload_dir: Directory holding uploaded files
            url_prefix: URL path the directory is mounted at
        """
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Local storage initialized at: {self.upload_dir}")

    def generate_filename(self, original_filename: str, field: str = "images") -> str:
        """
        Generate a unique filename for an upload.

        Args:
            original_filename: Client filename (only its extension is kept)
            field: Form field the file came from

        Returns:
            Filename: {field}-{epoch_millis}-{random}{ext}
        """
        ext = os.path.splitext(original_filename or "")[1].lower()
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}"
        return f"{field}-{unique_suffix}{ext}"

    def url_for(self, filename: str) -> str:
        return f"{self.url_prefix}/{filename}"

    def path_for_url(self, url: str) -> Path:
        """
        Resolve a stored URL back to its file.

        Only the final path component is used, so a URL can never point
        outside the upload directory.
        """
        return self.upload_dir / Path(url).name

    def save(self, fileobj: BinaryIO, original_filename: str, field: str = "images") -> str:
        """
        Write an upload to disk.

        Args:
            fileobj: Readable binary file object
            original_filename: Client filename
            field: Form field name used as filename prefix

        Returns:
            Public URL of the stored file

        Raises:
            LocalStorageError: If the file cannot be written
        """
        filename = self.generate_filename(original_filename, field)
        destination = self.upload_dir / filename
        try:
            with open(destination, "wb") as buffer:
                shutil.copyfileobj(fileobj, buffer)
        except OSError as e:
            logger.error(f"Error writing upload {destination}: {e}")
            raise LocalStorageError(f"Failed to store {original_filename}: {e}")

        logger.debug(f"Stored upload {original_filename!r} as {filename}")
        return self.url_for(filename)

    def exists(self, url: str) -> bool:
        return self.path_for_url(url).is_file()

    def delete_file(self, url: str) -> bool:
        """
        Delete the file behind a stored URL.

        Args:
            url: Stored URL (e.g. /uploads/images-1700000000000-42.jpg)

        Returns:
            True if a file was removed, False if it was already gone

        Raises:
            LocalStorageError: If the file exists but cannot be removed
        """
        path = self.path_for_url(url)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug(f"File already gone: {path}")
            return False
        except OSError as e:
            logger.error(f"Error deleting file {path}: {e}")
            raise LocalStorageError(f"Failed to delete {url}: {e}")

        logger.info(f"Deleted file: {path}")
        return True

    def delete_files_bulk(self, urls: List[str]) -> Tuple[int, List[str]]:
        """
        Delete several files, continuing past failures.

        Args:
            urls: Stored URLs

        Returns:
            Tuple of (removed count, URLs that could not be removed)
        """
        removed = 0
        failed = []
        for url in urls:
            try:
                if self.delete_file(url):
                    removed += 1
            except LocalStorageError:
                failed.append(url)
        return removed, failed
