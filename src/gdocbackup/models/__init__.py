"""Public model exports for gdocbackup."""

from __future__ import annotations

from .manifest import Manifest, ManifestEntry
from .remote_document import (
    OWNER_ME,
    OWNER_UNKNOWN,
    UNORGANIZED_LABEL,
    RemoteDocument,
    ResolvedPath,
)
from .results import BackupResult, BackupStatus

__all__ = [
    "RemoteDocument",
    "ResolvedPath",
    "Manifest",
    "ManifestEntry",
    "BackupResult",
    "BackupStatus",
    "OWNER_ME",
    "OWNER_UNKNOWN",
    "UNORGANIZED_LABEL",
]
