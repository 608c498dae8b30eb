"""Data models for remote documents and their resolved local paths."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from gdocbackup.util.paths import build_relative_path

OWNER_ME: str = "me"
OWNER_UNKNOWN: str = "unknown"
UNORGANIZED_LABEL: str = "Unorganized"


@dataclass(frozen=True, slots=True)
class RemoteDocument:
    """
    An exportable document as reported by one listing run.

    Notes:
        - `id` is stable across renames and moves; `name` is not.
        - `version` only ever increases for a given id and is the sole signal
          used to decide whether a document changed.
        - `parent_ids` is empty for unorganized documents and may hold several
          ids when the document is filed in more than one folder.
    """

    id: str
    name: str
    version: int
    owner: str
    mime_type: str
    parent_ids: tuple[str, ...] = ()
    modified_time: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    """
    Candidate local locations of one document, one ancestor chain per parent.

    The first chain is the canonical one: it is the only path the document is
    downloaded to. The remaining chains are kept for the manifest record.
    """

    chains: tuple[tuple[str, ...], ...]
    name: str
    extension: str

    def __post_init__(self) -> None:
        if not self.chains:
            raise ValueError("ResolvedPath requires at least one ancestor chain")

    @property
    def canonical_chain(self) -> tuple[str, ...]:
        return self.chains[0]

    def relative_path(self) -> str:
        """Sanitized, `/`-separated path of the canonical location."""
        return build_relative_path(self.canonical_chain, self.name, self.extension)

    def candidate_paths(self) -> list[str]:
        return [build_relative_path(chain, self.name, self.extension) for chain in self.chains]
