"""Exception hierarchy and HTTP error mapping for gdrivefetch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveFetchError(Exception):
    """
    Base exception for gdrivefetch.

    Attributes:
        details: Optional structured information (e.g., HTTP status, reason).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class AuthError(GDriveFetchError):
    """Raised when OAuth authentication/refresh fails."""


class PermissionError(GDriveFetchError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(GDriveFetchError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(GDriveFetchError):
    """Raised when a Drive item is not found (HTTP 404)."""


class RateLimitError(GDriveFetchError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(GDriveFetchError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(GDriveFetchError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(GDriveFetchError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdrivefetch exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "downloadQuotaExceeded",
    "exportSizeLimitExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveFetchError:
    """
    Map an HTTP error to a gdrivefetch exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - 5xx and everything else -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
