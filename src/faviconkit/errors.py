from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class FaviconKitError(Exception):
    """Base error handed back to the transport layer.

    `code` and `detail` are what the caller sees; `status_code` is the HTTP
    status the code maps to.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.code.value)
        self.detail = detail

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code.value}
        if self.detail:
            payload["details"] = self.detail
        return payload


class ValidationError(FaviconKitError):
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class FileTooLargeError(FaviconKitError):
    code = ErrorCode.FILE_TOO_LARGE
    status_code = 413


class InternalError(FaviconKitError):
    # Never carries a detail: internals are logged, not leaked.
    code = ErrorCode.INTERNAL_ERROR
    status_code = 500

    def __init__(self) -> None:
        super().__init__(None)


class ImageDecodeError(ValueError):
    pass


class IcoEncodeError(ValueError):
    pass
