"""Paginated, retrying enumeration of exportable documents."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from gdocbackup.errors import RemoteListError, RemoteStoreError
from gdocbackup.models import RemoteDocument
from gdocbackup.util.mime import build_exportable_query, is_exportable

from .remote_store import ListPage, RemoteStore

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE: int = 1000

ProgressCallback = Callable[[int], None]


@dataclass(frozen=True)
class _RetryPolicy:
    max_attempts: int = 10
    delay_sec: float = 1.0


class RemoteLister:
    """
    List every non-trashed exportable document.

    The result is all-or-nothing: a page that still fails after the retry
    budget aborts the whole listing with RemoteListError.
    """

    def __init__(
        self,
        store: RemoteStore,
        *,
        max_attempts: int = 10,
        retry_delay_sec: float = 1.0,
        page_size: int = DEFAULT_PAGE_SIZE,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._store = store
        self._retry_policy = _RetryPolicy(max_attempts=max_attempts, delay_sec=retry_delay_sec)
        self._page_size = page_size
        self._on_progress = on_progress
        self._query = build_exportable_query()

    def list_exportable(self) -> list[RemoteDocument]:
        documents: list[RemoteDocument] = []
        scanned = 0
        page_token: Optional[str] = None

        while True:
            page = self._fetch_page(page_token)
            scanned += len(page.documents)

            for doc in page.documents:
                # The query already filters by mime type; a stale table entry is an exclusion.
                if not is_exportable(doc.mime_type):
                    logger.debug("Excluding %s: no export format for %s", doc.id, doc.mime_type)
                    continue
                documents.append(doc)

            logger.debug("Listing %d files", scanned)
            if self._on_progress is not None:
                self._on_progress(scanned)

            page_token = page.next_page_token
            if not page_token:
                break

        logger.info("Scanned %d files.", len(documents))
        return documents

    def _fetch_page(self, page_token: Optional[str]) -> ListPage:
        policy = self._retry_policy
        last_exc: Optional[RemoteStoreError] = None

        for attempt in range(1, policy.max_attempts + 1):
            try:
                return self._store.list_page(self._query, page_token, self._page_size)
            except RemoteStoreError as exc:
                last_exc = exc
                if attempt < policy.max_attempts:
                    logger.warning(
                        "Listing page failed (attempt %d/%d): %s",
                        attempt,
                        policy.max_attempts,
                        exc,
                    )
                    time.sleep(policy.delay_sec)

        raise RemoteListError(
            f"Listing failed after {policy.max_attempts} attempts",
            details={"page_token": page_token, "attempts": policy.max_attempts},
            cause=last_exc,
        ) from last_exc
