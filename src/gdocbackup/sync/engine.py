"""
Incremental backup engine.

Lists exportable documents, compares them against the previous manifest and
exports only what changed. The new manifest is written once, after every
document has been handled; any failure leaves the previous manifest as the
durable record.
"""

from __future__ import annotations

import enum
import logging
from typing import Optional

from gdocbackup.errors import ExportError, RemoteLookupError, RemoteStoreError
from gdocbackup.models import BackupResult, Manifest
from gdocbackup.util.mime import export_format_for
from gdocbackup.util.time import now_utc

from .exporter import DocumentExporter
from .lister import ProgressCallback, RemoteLister
from .manifest_store import ManifestStore
from .parent_resolver import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_ROOT_LABEL,
    ParentNameCache,
    ParentPathResolver,
)
from .remote_store import RemoteStore

logger = logging.getLogger(__name__)


class SyncState(enum.Enum):
    IDLE = "idle"
    LISTING = "listing"
    DOWNLOADING = "downloading"
    FINALIZING = "finalizing"
    COMPLETED = "completed"
    FAILED = "failed"


class SyncEngine:
    """
    Back up one destination directory from a RemoteStore.

    Runs are single-threaded and strictly sequential. Two runs against the
    same destination at once are not supported.
    """

    def __init__(
        self,
        store: RemoteStore,
        destination: str,
        *,
        manifest_store: Optional[ManifestStore] = None,
        exporter: Optional[DocumentExporter] = None,
        lister: Optional[RemoteLister] = None,
        root_label: str = DEFAULT_ROOT_LABEL,
        max_depth: int = DEFAULT_MAX_DEPTH,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        self._store = store
        self.destination = destination
        self._manifest_store = manifest_store or ManifestStore()
        self._exporter = exporter or DocumentExporter(store, destination)
        self._lister = lister or RemoteLister(store, on_progress=on_progress)
        self._root_label = root_label
        self._max_depth = max_depth
        self.state = SyncState.IDLE

    def run(self) -> BackupResult:
        """
        Execute one backup run.

        Raises:
            ManifestCorruptError: the previous manifest cannot be parsed.
            RemoteListError: listing failed after retries.
            RemoteLookupError / CycleOrMultiParentError: an ancestor chain
                could not be resolved.
            ExportError: a changed document could not be exported.
            ManifestWriteError: the new manifest could not be written.
        """
        try:
            return self._run()
        except Exception:
            self.state = SyncState.FAILED
            raise

    def _run(self) -> BackupResult:
        logger.info("Backing up Google docs to %s", self.destination)

        previous = self._manifest_store.load(self.destination)
        if previous.entries:
            logger.info("Last backup %s", previous.timestamp)

        self.state = SyncState.LISTING
        documents = self._lister.list_exportable()

        resolver = ParentPathResolver(
            self._store,
            ParentNameCache(self._root_id(), self._root_label),
            max_depth=self._max_depth,
        )

        self.state = SyncState.DOWNLOADING
        manifest = Manifest.new()
        downloaded = 0
        skipped = 0

        for doc in documents:
            fmt = export_format_for(doc.mime_type)
            if fmt is None:
                # Lister filters these; guards against a table entry removed mid-run.
                logger.debug("Excluding %s: no export format for %s", doc.id, doc.mime_type)
                continue

            resolved = resolver.resolve_document(doc, fmt.extension)
            relative_path = resolved.relative_path()
            for other in resolved.candidate_paths()[1:]:
                logger.debug("%s is also filed at %s; not written there", doc.id, other)

            if previous.already_downloaded(doc):
                logger.info("Skipping %s - unchanged from last backup", relative_path)
                manifest.copy_entry(previous, doc)
                skipped += 1
                continue

            logger.info("Downloading %s", relative_path)
            try:
                written = self._exporter.export(doc, relative_path)
            except ExportError:
                logger.error("Export failed for %s; manifest not updated", relative_path)
                raise
            manifest.add_entry(doc, resolved, written, downloaded_time=now_utc())
            downloaded += 1

        self.state = SyncState.FINALIZING
        self._manifest_store.save(self.destination, manifest)

        self.state = SyncState.COMPLETED
        logger.info("Backup complete: %d downloaded, %d unchanged", downloaded, skipped)
        return BackupResult(
            status="completed",
            manifest=manifest,
            downloaded=downloaded,
            skipped=skipped,
        )

    def _root_id(self) -> str:
        try:
            return self._store.get_root_id()
        except RemoteStoreError as exc:
            raise RemoteLookupError("Failed to look up the root folder", cause=exc) from exc
