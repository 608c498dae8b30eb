"""Backup manifest: the durable record of what a successful run downloaded."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from gdocbackup.util.time import now_utc, parse_rfc3339, to_rfc3339

from .remote_document import RemoteDocument, ResolvedPath

# Placeholder written for an unset modified time.
_ZERO_TIME: str = "0001-01-01T00:00:00Z"


@dataclass(frozen=True, slots=True)
class ManifestEntry:
    """One downloaded document, frozen at the time it was written to disk."""

    id: str
    name: str
    version: int
    owner: str
    parent_names: tuple[tuple[str, ...], ...]
    modified_time: Optional[datetime]
    downloaded_time: datetime
    download_path: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "Id": self.id,
            "Name": self.name,
            "Version": self.version,
            "Owner": self.owner,
            "ParentNames": [list(chain) for chain in self.parent_names],
            "ModifiedTime": to_rfc3339(self.modified_time) if self.modified_time else _ZERO_TIME,
            "DownloadedTime": to_rfc3339(self.downloaded_time),
            "DownloadPath": self.download_path,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ManifestEntry:
        """
        Build an entry from its serialized form.

        Raises:
            KeyError, TypeError, ValueError: if the payload is malformed.
        """
        if not isinstance(data, dict):
            raise TypeError("manifest entry must be an object")

        version = data["Version"]
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError("Version must be an integer")

        parent_names = data.get("ParentNames") or []
        if not isinstance(parent_names, list) or not all(
            isinstance(chain, list) and all(isinstance(n, str) for n in chain)
            for chain in parent_names
        ):
            raise TypeError("ParentNames must be a list of string lists")

        modified_raw = data.get("ModifiedTime")
        modified_time = None
        if modified_raw and modified_raw != _ZERO_TIME:
            modified_time = parse_rfc3339(modified_raw)

        return cls(
            id=_require_str(data, "Id"),
            name=_require_str(data, "Name"),
            version=version,
            owner=_require_str(data, "Owner"),
            parent_names=tuple(tuple(chain) for chain in parent_names),
            modified_time=modified_time,
            downloaded_time=parse_rfc3339(data["DownloadedTime"]),
            download_path=_require_str(data, "DownloadPath"),
        )


@dataclass(slots=True)
class Manifest:
    """
    Mapping of document id to ManifestEntry, stamped with its creation time.

    A manifest is built up during one run and written once; entries are
    replaced whole, never edited.
    """

    timestamp: datetime
    entries: dict[str, ManifestEntry] = field(default_factory=dict)

    @classmethod
    def new(cls) -> Manifest:
        return cls(timestamp=now_utc())

    def already_downloaded(self, document: RemoteDocument) -> bool:
        """True if this manifest holds the same id at the same version."""
        entry = self.entries.get(document.id)
        return entry is not None and entry.version == document.version

    def add_entry(
        self,
        document: RemoteDocument,
        resolved: ResolvedPath,
        download_path: str,
        downloaded_time: Optional[datetime] = None,
    ) -> ManifestEntry:
        entry = ManifestEntry(
            id=document.id,
            name=document.name,
            version=document.version,
            owner=document.owner,
            parent_names=resolved.chains,
            modified_time=document.modified_time,
            downloaded_time=downloaded_time or now_utc(),
            download_path=download_path,
        )
        self.entries[document.id] = entry
        return entry

    def copy_entry(self, previous: Manifest, document: RemoteDocument) -> ManifestEntry:
        """Carry the previous run's entry for `document` over unchanged."""
        entry = previous.entries[document.id]
        self.entries[document.id] = entry
        return entry

    def to_dict(self) -> dict[str, Any]:
        return {
            "Timestamp": to_rfc3339(self.timestamp),
            "Entries": {doc_id: entry.to_dict() for doc_id, entry in self.entries.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        if not isinstance(data, dict):
            raise TypeError("manifest must be an object")

        raw_entries = data.get("Entries") or {}
        if not isinstance(raw_entries, dict):
            raise TypeError("Entries must be an object")

        entries: dict[str, ManifestEntry] = {}
        for doc_id, raw in raw_entries.items():
            entry = ManifestEntry.from_dict(raw)
            if entry.id != doc_id:
                raise ValueError(f"entry key {doc_id!r} does not match its Id {entry.id!r}")
            entries[doc_id] = entry

        return cls(timestamp=parse_rfc3339(data["Timestamp"]), entries=entries)


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value
