"""OAuth credentials and Drive service construction for gdocbackup."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from gdocbackup.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)


class OAuthClient:
    """Load, refresh or obtain OAuth credentials and build the Drive service."""

    def __init__(self, auth_info: AuthInfo) -> None:
        if auth_info.kind != "oauth":
            raise InvalidArgumentError("OAuthClient requires AuthInfo(kind='oauth')")
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Return OAuth credentials for the given scopes.

        The cached token file is used when present. An expired token is
        refreshed; without a usable token the installed-app consent flow runs
        in the browser and its token is cached for the next backup.

        Args:
            scopes: OAuth scopes.
            ensure_valid: If False, return cached credentials without refreshing.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on load/refresh/flow failures.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        try:
            from google.auth.transport.requests import Request
            from google.oauth2.credentials import Credentials
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth and google-auth-oauthlib"},
                cause=exc,
            ) from exc

        token_file = self._auth_info.token_file
        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(token_file, scopes=list(scopes))
            except Exception as exc:
                raise AuthError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not ensure_valid or creds.valid:
                return creds

            if creds.refresh_token:
                logger.debug("Refreshing OAuth token from %s", token_file)
                try:
                    creds.refresh(Request())
                except Exception as exc:
                    raise AuthError(
                        "Failed to refresh OAuth credentials",
                        details={"token_file": token_file},
                        cause=exc,
                    ) from exc
                self._save_credentials(creds)
                return creds

        client_secrets = self._auth_info.client_secrets_file
        if not os.path.exists(client_secrets):
            raise AuthError(
                "OAuth client secrets file not found",
                details={"client_secrets_file": client_secrets},
            )

        logger.info("Opening browser for Google authorization")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=list(scopes))
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": client_secrets, "token_file": token_file},
                cause=exc,
            ) from exc
        self._save_credentials(creds)
        return creds

    def build_drive_service(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Build a Drive v3 API service resource.

        Returns:
            googleapiclient.discovery.Resource
        """
        try:
            from googleapiclient.discovery import build
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                details={"hint": "Install google-api-python-client"},
                cause=exc,
            ) from exc

        creds = self.get_credentials(scopes=scopes, ensure_valid=ensure_valid)
        try:
            return build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        try:
            token_dir = os.path.dirname(token_file)
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
