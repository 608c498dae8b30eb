"""Google Drive API controller implementing the RemoteStore capability."""

from __future__ import annotations

import io
import json
from typing import Any, Callable, Optional, Sequence, TypeVar

from gdocbackup.auth import AuthInfo, OAuthClient
from gdocbackup.errors import (
    ApiError,
    AuthError,
    HttpErrorInfo,
    NetworkError,
    RemoteStoreError,
    map_http_error,
)
from gdocbackup.models import OWNER_ME, OWNER_UNKNOWN, RemoteDocument
from gdocbackup.sync.remote_store import ItemMetadata, ListPage
from gdocbackup.util.time import parse_rfc3339

from .fields import LIST_FIELDS, METADATA_FIELDS

T = TypeVar("T")


class GoogleDriveController:
    """
    Read-only Drive API controller.

    Notes:
        - The Drive `service` object is NOT exposed.
        - Each request is executed exactly once; failures are mapped to the
          RemoteStoreError family. Retry policy belongs to the caller.
    """

    DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive.readonly",)

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
    ) -> None:
        use_scopes = list(scopes) if scopes is not None else list(self.DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        self._service = client.build_drive_service(use_scopes, ensure_valid=True)

    @classmethod
    def from_service(cls, service: Any) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # RemoteStore
    # ----------------------------
    def get_root_id(self) -> str:
        req = self._service.files().get(fileId="root", fields="id")
        data = self._execute(req.execute)
        return data["id"]

    def list_page(
        self,
        query: str,
        page_token: Optional[str],
        page_size: int,
    ) -> ListPage:
        req = self._service.files().list(
            q=query,
            fields=LIST_FIELDS,
            pageSize=page_size,
            pageToken=page_token or None,
        )
        data = self._execute(req.execute)
        documents = [_file_dict_to_document(f) for f in data.get("files", []) or []]
        return ListPage(documents=documents, next_page_token=data.get("nextPageToken") or None)

    def get_metadata(self, item_id: str) -> ItemMetadata:
        req = self._service.files().get(fileId=item_id, fields=METADATA_FIELDS)
        data = self._execute(req.execute)
        parents = data.get("parents", []) or []
        return ItemMetadata(
            id=data.get("id", item_id),
            name=data.get("name", ""),
            parents=tuple(parents),
        )

    def export(self, file_id: str, mime_type: str) -> bytes:
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        req = self._service.files().export_media(fileId=file_id, mimeType=mime_type)

        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, req)
        done = False
        while not done:
            _status, done = self._execute(downloader.next_chunk)
        return buffer.getvalue()

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except RemoteStoreError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> RemoteStoreError:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _owner_of(owners: Any) -> str:
    if not isinstance(owners, list) or len(owners) != 1 or not isinstance(owners[0], dict):
        return OWNER_UNKNOWN
    owner = owners[0]
    if owner.get("me"):
        return OWNER_ME
    email = owner.get("emailAddress")
    return email if isinstance(email, str) and email else OWNER_UNKNOWN


def _file_dict_to_document(data: dict[str, Any]) -> RemoteDocument:
    modified_time = None
    if isinstance(data.get("modifiedTime"), str):
        try:
            modified_time = parse_rfc3339(data["modifiedTime"])
        except ValueError:
            modified_time = None

    # Drive serializes int64 fields such as version as strings.
    version = 0
    raw_version = data.get("version")
    if isinstance(raw_version, int):
        version = raw_version
    elif isinstance(raw_version, str) and raw_version.isdigit():
        version = int(raw_version)

    parents = data.get("parents", []) or []
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")

    return RemoteDocument(
        id=data["id"],
        name=name if isinstance(name, str) else "",
        version=version,
        owner=_owner_of(data.get("owners")),
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parent_ids=tuple(parents) if isinstance(parents, list) else (),
        modified_time=modified_time,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except ValueError:
            payload = None
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
