"""Authentication information and config-directory layout for gdocbackup."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

CONFIG_DIR_ENV: str = "GDOCBACKUP_CONFIG_DIR"
DEFAULT_CONFIG_DIRNAME: str = ".backup_google_docs"
CLIENT_SECRETS_BASENAME: str = "credentials.json"
TOKEN_BASENAME: str = "token.json"


def default_config_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Return the directory holding OAuth client secrets and the cached token.

    `$GDOCBACKUP_CONFIG_DIR` wins; otherwise `~/.backup_google_docs`.
    """
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_DIR_ENV, "").strip()
    if override:
        return os.path.expanduser(override)
    return os.path.join(os.path.expanduser("~"), DEFAULT_CONFIG_DIRNAME)


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    Only OAuth is supported:
        kind = "oauth"
        data must include:
            - client_secrets_file
            - token_file
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind != "oauth":
            raise ValueError("AuthInfo.kind must be 'oauth'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        for key in ("client_secrets_file", "token_file"):
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"AuthInfo.data['{key}'] must be a non-empty string")

    @classmethod
    def from_config_dir(cls, config_dir: str) -> AuthInfo:
        """Build OAuth info from `credentials.json` and `token.json` in config_dir."""
        return cls(
            kind="oauth",
            data={
                "client_secrets_file": os.path.join(config_dir, CLIENT_SECRETS_BASENAME),
                "token_file": os.path.join(config_dir, TOKEN_BASENAME),
            },
        )

    @property
    def client_secrets_file(self) -> str:
        """Path to OAuth client secrets JSON."""
        return str(self.data["client_secrets_file"])

    @property
    def token_file(self) -> str:
        """Path to OAuth token JSON (authorized user)."""
        return str(self.data["token_file"])
