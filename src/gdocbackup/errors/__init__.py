"""Public error exports for gdocbackup."""

from __future__ import annotations

from .exceptions import (
    AmbiguousAncestryError,
    AncestryCycleError,
    ApiError,
    AuthError,
    CycleOrMultiParentError,
    ExportError,
    GDocBackupError,
    HttpErrorInfo,
    InvalidArgumentError,
    ManifestCorruptError,
    ManifestWriteError,
    NetworkError,
    NotFoundError,
    PermissionDeniedError,
    QuotaExceededError,
    RateLimitError,
    RemoteListError,
    RemoteLookupError,
    RemoteStoreError,
    map_http_error,
)

__all__ = [
    "GDocBackupError",
    # Transport
    "RemoteStoreError",
    "AuthError",
    "PermissionDeniedError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
    # Backup run
    "RemoteListError",
    "RemoteLookupError",
    "CycleOrMultiParentError",
    "AmbiguousAncestryError",
    "AncestryCycleError",
    "ExportError",
    "ManifestCorruptError",
    "ManifestWriteError",
]
