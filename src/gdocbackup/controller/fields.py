"""Field definitions for Google Drive API responses."""

from __future__ import annotations

DOCUMENT_FIELDS: str = (
    "id,"
    "name,"
    "parents,"
    "owners,"
    "trashed,"
    "version,"
    "mimeType,"
    "modifiedTime"
)

LIST_FIELDS: str = f"nextPageToken,files({DOCUMENT_FIELDS})"

METADATA_FIELDS: str = "id,name,parents,trashed"
