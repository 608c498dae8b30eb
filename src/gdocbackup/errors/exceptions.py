"""Exception hierarchy and HTTP error mapping for gdocbackup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDocBackupError(Exception):
    """
    Base exception for gdocbackup.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
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


# ----------------------------
# Transport errors (raised by the Drive controller)
# ----------------------------
class RemoteStoreError(GDocBackupError):
    """Base for failures reported by the remote document store."""


class AuthError(RemoteStoreError):
    """Raised when OAuth authentication/refresh fails."""


class PermissionDeniedError(RemoteStoreError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(RemoteStoreError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(RemoteStoreError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class RateLimitError(RemoteStoreError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(RemoteStoreError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(RemoteStoreError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(RemoteStoreError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


# ----------------------------
# Backup run errors
# ----------------------------
class RemoteListError(GDocBackupError):
    """Raised when a listing page could not be fetched within the retry budget."""


class RemoteLookupError(GDocBackupError):
    """Raised when an ancestor's metadata could not be fetched."""


class CycleOrMultiParentError(GDocBackupError):
    """Raised when an ancestor chain cannot be resolved to a single path."""


class AmbiguousAncestryError(CycleOrMultiParentError):
    """
    Raised when an intermediate ancestor has more than one parent.

    This is a structural limitation of the path layout, not a transient fault:
    only the leaf document may be filed under several folders.
    """


class AncestryCycleError(CycleOrMultiParentError):
    """Raised when an ancestor walk revisits an id or exceeds the depth bound."""


class ExportError(GDocBackupError):
    """Raised when exporting or writing a changed document fails."""


class ManifestCorruptError(GDocBackupError):
    """Raised when a manifest file exists but cannot be parsed."""


class ManifestWriteError(GDocBackupError):
    """Raised when the new manifest could not be written."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdocbackup exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)

_RATE_LIMIT_REASONS: tuple[str, ...] = (
    "rateLimitExceeded",
    "userRateLimitExceeded",
)


def _reason_matches(reason: str | None, keywords: tuple[str, ...]) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in keywords)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> RemoteStoreError:
    """
    Map an HTTP error to a gdocbackup transport exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> RateLimitError if the reason is a rate limit,
                 QuotaExceededError if quota-related,
                 PermissionDeniedError otherwise
        - 404 -> NotFoundError
        - 429 -> RateLimitError
        - otherwise -> ApiError
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
        if _reason_matches(info.reason, _RATE_LIMIT_REASONS):
            return RateLimitError(message, details=details, cause=cause)
        if _reason_matches(info.reason, _QUOTA_REASON_KEYWORDS):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionDeniedError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
