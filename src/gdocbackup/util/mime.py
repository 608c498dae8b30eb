from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExportFormat:
    """Target format a Google-apps document is exported to."""

    mime_type: str
    extension: str


EXPORT_FORMATS: dict[str, ExportFormat] = {
    "application/vnd.google-apps.spreadsheet": ExportFormat(
        mime_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        extension=".xlsx",
    ),
    "application/vnd.google-apps.document": ExportFormat(
        mime_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        extension=".docx",
    ),
    "application/vnd.google-apps.presentation": ExportFormat(
        mime_type="application/vnd.openxmlformats-officedocument.presentationml.presentation",
        extension=".pptx",
    ),
    "application/vnd.google-apps.form": ExportFormat(
        mime_type="application/zip",
        extension=".zip",
    ),
}


def export_format_for(mime_type: str) -> Optional[ExportFormat]:
    """Return the export format for a mime type, or None if it is not exportable."""
    return EXPORT_FORMATS.get(mime_type)


def is_exportable(mime_type: str) -> bool:
    return mime_type in EXPORT_FORMATS


def build_exportable_query() -> str:
    """
    Build the Drive `q` filter selecting non-trashed exportable documents.

    Example:
        trashed != true and (mimeType='a' or mimeType='b')
    """
    clauses = " or ".join(f"mimeType='{mime}'" for mime in EXPORT_FORMATS)
    return f"trashed != true and ({clauses})"
