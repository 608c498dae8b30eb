"""The remote capability the backup core consumes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from gdocbackup.models import RemoteDocument


@dataclass(frozen=True, slots=True)
class ListPage:
    """One page of a listing; an empty `next_page_token` ends the listing."""

    documents: list[RemoteDocument]
    next_page_token: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ItemMetadata:
    """Name and parents of a container, used to walk ancestor chains."""

    id: str
    name: str
    parents: tuple[str, ...] = ()


class RemoteStore(Protocol):
    """
    Remote document store.

    Implementations raise `RemoteStoreError` subclasses on failure. The core
    decides which calls are retried (listing pages only).
    """

    def get_root_id(self) -> str: ...

    def list_page(
        self,
        query: str,
        page_token: Optional[str],
        page_size: int,
    ) -> ListPage: ...

    def get_metadata(self, item_id: str) -> ItemMetadata: ...

    def export(self, file_id: str, mime_type: str) -> bytes: ...
