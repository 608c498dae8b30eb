"""Load and persist the backup manifest of a destination directory."""

from __future__ import annotations

import json
import logging
import os
import tempfile

from gdocbackup.errors import ManifestCorruptError, ManifestWriteError
from gdocbackup.models import Manifest

logger = logging.getLogger(__name__)

MANIFEST_BASENAME: str = "manifest.json"


class ManifestStore:
    """
    Reads the previous run's manifest and writes the new one.

    A missing file is a first run, not an error. Writes go to a temporary file
    that replaces the manifest only once it is fully on disk.
    """

    def __init__(self, basename: str = MANIFEST_BASENAME) -> None:
        self.basename = basename

    def path_for(self, directory: str) -> str:
        return os.path.join(directory, self.basename)

    def load(self, directory: str) -> Manifest:
        path = self.path_for(directory)
        if not os.path.exists(path):
            logger.debug("No manifest found at %s", path)
            return Manifest.new()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Manifest.from_dict(data)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise ManifestCorruptError(
                f"Manifest at {path} cannot be parsed",
                details={"path": path},
                cause=exc,
            ) from exc

    def save(self, directory: str, manifest: Manifest) -> str:
        path = self.path_for(directory)
        payload = json.dumps(manifest.to_dict(), ensure_ascii=False, indent=2)

        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.basename}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise ManifestWriteError(
                f"Failed to write manifest to {path}",
                details={"path": path},
                cause=exc,
            ) from exc

        logger.debug("Wrote manifest with %d entries to %s", len(manifest.entries), path)
        return path
