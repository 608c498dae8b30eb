from .mime import (
    EXPORT_FORMATS,
    ExportFormat,
    build_exportable_query,
    export_format_for,
    is_exportable,
)
from .paths import build_relative_path, sanitize_part
from .time import normalize_dt, now_utc, parse_rfc3339, to_rfc3339

__all__ = [
    "EXPORT_FORMATS",
    "ExportFormat",
    "build_exportable_query",
    "export_format_for",
    "is_exportable",
    "sanitize_part",
    "build_relative_path",
    "now_utc",
    "parse_rfc3339",
    "to_rfc3339",
    "normalize_dt",
]
