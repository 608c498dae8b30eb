"""Resolve a document's ancestor ids into a chain of folder names."""

from __future__ import annotations

import logging
from typing import Optional

from gdocbackup.errors import (
    AmbiguousAncestryError,
    AncestryCycleError,
    RemoteLookupError,
    RemoteStoreError,
)
from gdocbackup.models import UNORGANIZED_LABEL, RemoteDocument, ResolvedPath

from .remote_store import RemoteStore

logger = logging.getLogger(__name__)

DEFAULT_ROOT_LABEL: str = "Drive"
DEFAULT_MAX_DEPTH: int = 256


class ParentNameCache:
    """
    Ancestor id -> resolved name chain, owned by a single backup run.

    The root container is seeded up front so walks terminate without a remote
    call for it.
    """

    def __init__(self, root_id: str, root_label: str = DEFAULT_ROOT_LABEL) -> None:
        self.root_id = root_id
        self._chains: dict[str, tuple[str, ...]] = {root_id: (root_label,)}

    def get(self, item_id: str) -> Optional[tuple[str, ...]]:
        return self._chains.get(item_id)

    def put(self, item_id: str, chain: tuple[str, ...]) -> None:
        self._chains[item_id] = chain

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._chains

    def __len__(self) -> int:
        return len(self._chains)


class ParentPathResolver:
    """
    Memoized walk from a container up to the root.

    Only the leaf document may have several parents; an ancestor with more
    than one parent cannot be placed on a single chain and is rejected.
    """

    def __init__(
        self,
        store: RemoteStore,
        cache: ParentNameCache,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._store = store
        self._cache = cache
        self._max_depth = max_depth

    @property
    def cache(self) -> ParentNameCache:
        return self._cache

    def resolve(self, item_id: str) -> tuple[str, ...]:
        """
        Return the name chain from the root down to and including `item_id`.

        Raises:
            RemoteLookupError: metadata for an ancestor could not be fetched.
            AmbiguousAncestryError: an ancestor reports more than one parent.
            AncestryCycleError: the walk revisits an id or gets too deep.
        """
        cached = self._cache.get(item_id)
        if cached is not None:
            return cached

        # Walk upward until a cached id or a parentless container is reached.
        pending: list[tuple[str, str]] = []
        visited: set[str] = set()
        current = item_id

        while True:
            cached = self._cache.get(current)
            if cached is not None:
                base = cached
                break
            if current in visited:
                raise AncestryCycleError(
                    "Ancestor chain contains a cycle",
                    details={"item_id": item_id, "repeated_id": current},
                )
            if len(pending) >= self._max_depth:
                raise AncestryCycleError(
                    "Ancestor chain exceeds maximum depth",
                    details={"item_id": item_id, "max_depth": self._max_depth},
                )
            visited.add(current)

            meta = self._lookup(current)
            if len(meta.parents) > 1:
                raise AmbiguousAncestryError(
                    f"Multiple parents for folder '{meta.name}'",
                    details={"item_id": current, "parents": list(meta.parents)},
                )

            pending.append((current, meta.name))
            if not meta.parents:
                base = (UNORGANIZED_LABEL,)
                break
            current = meta.parents[0]

        chain = base
        for ancestor_id, name in reversed(pending):
            chain = chain + (name,)
            self._cache.put(ancestor_id, chain)

        return chain

    def resolve_document(self, document: RemoteDocument, extension: str) -> ResolvedPath:
        """Resolve one chain per parent of `document`; the first is canonical."""
        if document.parent_ids:
            chains = tuple(self.resolve(parent_id) for parent_id in document.parent_ids)
        else:
            chains = ((UNORGANIZED_LABEL,),)
        return ResolvedPath(chains=chains, name=document.name, extension=extension)

    def _lookup(self, item_id: str):
        logger.debug("Looking up ancestor %s", item_id)
        try:
            return self._store.get_metadata(item_id)
        except RemoteStoreError as exc:
            raise RemoteLookupError(
                f"Failed to fetch metadata for ancestor {item_id}",
                details={"item_id": item_id},
                cause=exc,
            ) from exc
