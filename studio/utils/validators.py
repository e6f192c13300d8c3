# studio/utils/validators.py

import os
from typing import Optional

from studio.app.exceptions import StudioValidationError

# ---------------------------------------------------------------------
# Configuration (tweakable)
# ---------------------------------------------------------------------

ALLOWED_EXTENSIONS = {".jpeg", ".jpg", ".png", ".gif", ".webp"}

ALLOWED_MIME_TYPES = {
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
}

MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024   # 10 MB


class ImageValidationError(StudioValidationError):
    """Raised when an uploaded file is rejected."""


def validate_image_upload(
    filename: Optional[str],
    content_type: Optional[str],
    size: int,
    *,
    max_size: int = MAX_FILE_SIZE_BYTES
) -> str:
    """
    Check that an upload is an allowed image before it is stored.

    Both the file extension and the declared MIME type must be allowed.

    Args:
        filename: Original client filename
        content_type: MIME type sent by the client
        size: File size in bytes
        max_size: Upper size limit in bytes

    Returns:
        The lower-cased file extension, including the dot

    Raises:
        ImageValidationError
    """
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise ImageValidationError("Only image files are allowed!")

    if (content_type or "").lower() not in ALLOWED_MIME_TYPES:
        raise ImageValidationError("Only image files are allowed!")

    if size <= 0:
        raise ImageValidationError(f"Empty image file: {filename}")

    if size > max_size:
        raise ImageValidationError(
            f"Image too large (max {max_size // (1024 * 1024)}MB): {filename}"
        )

    return ext
