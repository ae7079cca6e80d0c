from __future__ import annotations

import os

from faviconkit.config import settings
from faviconkit.errors import FileTooLargeError, ValidationError

ACCEPTED_CONTENT_TYPES = {"image/png", "image/jpeg"}
ACCEPTED_EXTENSIONS = {".png", ".jpg", ".jpeg"}


def validate_upload(
    filename: str | None,
    content_type: str | None,
    size: int,
    max_bytes: int | None = None,
) -> None:
    """Cheap acceptance check run before any decoding.

    Size is checked first. The type passes if either the content type or the
    file extension is PNG/JPEG; the extension is a fallback for clients that
    send a missing or generic content type.
    """
    limit = settings.max_upload_bytes if max_bytes is None else max_bytes
    if size > limit:
        raise FileTooLargeError()

    type_ok = (content_type or "").split(";")[0].strip().lower() in ACCEPTED_CONTENT_TYPES
    ext_ok = os.path.splitext(filename or "")[1].lower() in ACCEPTED_EXTENSIONS
    if not type_ok and not ext_ok:
        raise ValidationError(
            f"Unsupported file type: {content_type or 'unknown'}. Only PNG and JPEG are accepted."
        )
