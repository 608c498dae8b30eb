"""Result model for a backup run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .manifest import Manifest

BackupStatus = Literal["completed"]


@dataclass(slots=True)
class BackupResult:
    """Summary of a completed backup run; failed runs raise instead."""

    status: BackupStatus
    manifest: Manifest
    downloaded: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.downloaded + self.skipped
