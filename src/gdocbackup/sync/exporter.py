"""Export a remote document and write it under the destination directory."""

from __future__ import annotations

import os

from gdocbackup.errors import ExportError, RemoteStoreError
from gdocbackup.models import RemoteDocument
from gdocbackup.util.mime import export_format_for

from .remote_store import RemoteStore


class DocumentExporter:
    def __init__(self, store: RemoteStore, destination: str) -> None:
        self._store = store
        self.destination = destination

    def export(self, document: RemoteDocument, relative_path: str) -> str:
        """
        Export `document` and write it to `relative_path` (overwriting).

        Returns:
            The relative path that was written.

        Raises:
            ExportError: on any remote or local I/O failure.
        """
        fmt = export_format_for(document.mime_type)
        if fmt is None:
            raise ExportError(
                "No export format for mime type",
                details={"file_id": document.id, "mime_type": document.mime_type},
            )

        local_path = os.path.join(self.destination, *relative_path.split("/"))
        try:
            parent_dir = os.path.dirname(local_path)
            if parent_dir:
                os.makedirs(parent_dir, exist_ok=True)

            content = self._store.export(document.id, fmt.mime_type)

            with open(local_path, "wb") as f:
                f.write(content)
        except (RemoteStoreError, OSError) as exc:
            raise ExportError(
                f"Failed to export '{document.name}'",
                details={"file_id": document.id, "path": relative_path},
                cause=exc,
            ) from exc

        return relative_path
