from __future__ import annotations

import enum
from typing import Any, List, Optional

from .outcomes import Failure, HttpFailure, NoResponse


class RedmineClientError(Exception):
    """Base error for client failures."""


class ErrorKind(str, enum.Enum):
    CONNECTION = "connection"
    VALIDATION = "validation"
    HTTP_STATUS = "http_status"


class RedmineApiError(RedmineClientError):
    def __init__(
        self,
        *,
        kind: ErrorKind,
        message: str,
        method: str,
        path: str,
        status_code: Optional[int] = None,
        errors: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.method = method
        self.path = path
        self.status_code = status_code
        self.errors = list(errors or [])


class RedmineBodyTooLargeError(RedmineClientError):
    def __init__(self, *, size: int, limit: int, path: str):
        super().__init__(
            f"Request body for {path} is {size} bytes, above the {limit} byte limit"
        )
        self.size = size
        self.limit = limit
        self.path = path


class RedmineParseError(RedmineClientError):
    pass


class RedmineModelValidationError(RedmineClientError, ValueError):
    pass


def _validation_messages(body: Any) -> List[str]:
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not isinstance(errors, list):
        return []
    return [str(e) for e in errors]


def translate(
    failure: Failure, *, base_url: str, method: str, path: str
) -> Optional[RedmineApiError]:
    """
    Classify a failed call. First match wins:
      1. no response at all        -> CONNECTION
      2. body has an errors list   -> VALIDATION
      3. status with reason phrase -> HTTP_STATUS
    Returns None for anything else; the caller re-raises the original error.
    """
    if isinstance(failure, NoResponse):
        return RedmineApiError(
            kind=ErrorKind.CONNECTION,
            message=f"Connection problem ({base_url}): {failure.error_code}",
            method=method,
            path=path,
        )

    if isinstance(failure, HttpFailure):
        messages = _validation_messages(failure.body)
        if messages:
            return RedmineApiError(
                kind=ErrorKind.VALIDATION,
                message=", ".join(messages),
                method=method,
                path=path,
                status_code=failure.status_code,
                errors=messages,
            )
        if failure.reason:
            return RedmineApiError(
                kind=ErrorKind.HTTP_STATUS,
                message=f"{failure.status_code} {failure.reason} ({failure.path})",
                method=method,
                path=path,
                status_code=failure.status_code,
            )

    return None


__all__ = [
    "ErrorKind",
    "RedmineClientError",
    "RedmineApiError",
    "RedmineBodyTooLargeError",
    "RedmineParseError",
    "RedmineModelValidationError",
    "translate",
]
