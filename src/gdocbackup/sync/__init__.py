"""Incremental backup engine and its collaborators."""

from __future__ import annotations

from .engine import SyncEngine, SyncState
from .exporter import DocumentExporter
from .lister import RemoteLister
from .manifest_store import MANIFEST_BASENAME, ManifestStore
from .parent_resolver import ParentNameCache, ParentPathResolver
from .remote_store import ItemMetadata, ListPage, RemoteStore

__all__ = [
    "SyncEngine",
    "SyncState",
    "DocumentExporter",
    "RemoteLister",
    "ManifestStore",
    "MANIFEST_BASENAME",
    "ParentNameCache",
    "ParentPathResolver",
    "RemoteStore",
    "ListPage",
    "ItemMetadata",
]
