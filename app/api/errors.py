from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SUBMISSION_INCOMPLETE = "SUBMISSION_INCOMPLETE"
    RATE_LIMITED = "RATE_LIMITED"


class ApiErrorDetail(BaseModel):
    code: str
    message: str
    details: Any | None = Field(default=None)


class ApiError(BaseModel):
    error: ApiErrorDetail


DEFAULT_MESSAGES: dict[str, str] = {
    ApiErrorCode.VALIDATION_ERROR.value: "Invalid request",
    ApiErrorCode.HTTP_ERROR.value: "Request failed",
    ApiErrorCode.INTERNAL_ERROR.value: "Internal server error",
    ApiErrorCode.SUBMISSION_INCOMPLETE.value: "Word and coordinates required",
    ApiErrorCode.RATE_LIMITED.value: "Too many requests",
}


class ApiException(Exception):
    def __init__(
        self,
        *,
        status_code: int,
        code: ApiErrorCode | str,
        message: str | None = None,
        details: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code.value if isinstance(code, ApiErrorCode) else code
        self.message = message or DEFAULT_MESSAGES.get(self.code, "Request failed")
        self.details = details
        super().__init__(self.message)


class BadRequestError(ApiException):
    def __init__(self, code: ApiErrorCode | str, message: str | None = None, details: Any | None = None) -> None:
        super().__init__(status_code=400, code=code, message=message, details=details)


class RateLimitedError(ApiException):
    def __init__(self, retry_after_seconds: int, message: str | None = None) -> None:
        self.retry_after_seconds = retry_after_seconds
        super().__init__(
            status_code=429,
            code=ApiErrorCode.RATE_LIMITED,
            message=message,
            details={"retry_after_seconds": retry_after_seconds},
        )


def make_error_payload(code: ApiErrorCode | str, message: str, details: Any | None = None) -> dict[str, Any]:
    code_value = code.value if isinstance(code, ApiErrorCode) else code
    payload = ApiError(
        error=ApiErrorDetail(
            code=code_value,
            message=message,
            details=details,
        )
    ).model_dump(exclude_none=True)
    return payload


__all__ = [
    "ApiError",
    "ApiErrorCode",
    "ApiException",
    "BadRequestError",
    "RateLimitedError",
    "make_error_payload",
]
