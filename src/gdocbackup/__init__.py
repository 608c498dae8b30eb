"""gdocbackup public API."""

from __future__ import annotations

from gdocbackup.auth import AuthInfo, OAuthClient
from gdocbackup.controller import GoogleDriveController
from gdocbackup.errors import (
    AmbiguousAncestryError,
    AncestryCycleError,
    ApiError,
    AuthError,
    CycleOrMultiParentError,
    ExportError,
    GDocBackupError,
    ManifestCorruptError,
    ManifestWriteError,
    NetworkError,
    NotFoundError,
    RemoteListError,
    RemoteLookupError,
    RemoteStoreError,
)
from gdocbackup.models import BackupResult, Manifest, ManifestEntry, RemoteDocument, ResolvedPath
from gdocbackup.sync import (
    ManifestStore,
    ParentNameCache,
    ParentPathResolver,
    RemoteLister,
    RemoteStore,
    SyncEngine,
    SyncState,
)
from gdocbackup.util.paths import sanitize_part

__all__ = [
    # High-level
    "SyncEngine",
    "SyncState",
    "GoogleDriveController",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Core
    "ManifestStore",
    "ParentNameCache",
    "ParentPathResolver",
    "RemoteLister",
    "RemoteStore",
    "sanitize_part",
    # Models
    "RemoteDocument",
    "ResolvedPath",
    "Manifest",
    "ManifestEntry",
    "BackupResult",
    # Errors
    "GDocBackupError",
    "RemoteStoreError",
    "AuthError",
    "NotFoundError",
    "NetworkError",
    "ApiError",
    "RemoteListError",
    "RemoteLookupError",
    "CycleOrMultiParentError",
    "AmbiguousAncestryError",
    "AncestryCycleError",
    "ExportError",
    "ManifestCorruptError",
    "ManifestWriteError",
]
