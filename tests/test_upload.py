from __future__ import annotations

import pytest

from faviconkit.errors import ErrorCode, FileTooLargeError, ValidationError
from faviconkit.upload import validate_upload

MIB = 1024 * 1024


@pytest.mark.parametrize(
    ("filename", "content_type"),
    [
        ("logo.png", "image/png"),
        ("photo.jpg", "image/jpeg"),
        ("blob", "image/png"),
        ("LOGO.PNG", None),
        ("photo.jpeg", "application/octet-stream"),
        ("logo.bin", "image/png; charset=binary"),
    ],
)
def test_accepts_png_and_jpeg_by_type_or_extension(filename, content_type) -> None:
    validate_upload(filename, content_type, 1024)


@pytest.mark.parametrize(("filename", "content_type"), [("anim.gif", "image/gif"), ("x", None), (None, "text/plain")])
def test_rejects_other_types(filename, content_type) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_upload(filename, content_type, 1024)
    assert exc.value.code == ErrorCode.VALIDATION_ERROR
    assert "Only PNG and JPEG are accepted." in exc.value.detail


def test_too_large_checked_before_type() -> None:
    with pytest.raises(FileTooLargeError) as exc:
        validate_upload("anim.gif", "image/gif", 10 * MIB)
    assert exc.value.code == ErrorCode.FILE_TOO_LARGE
    assert exc.value.status_code == 413


def test_limit_is_inclusive() -> None:
    validate_upload("a.png", "image/png", 8 * MIB)
    with pytest.raises(FileTooLargeError):
        validate_upload("a.png", "image/png", 8 * MIB + 1)
