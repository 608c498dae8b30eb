"""Public auth exports for gdocbackup."""

from __future__ import annotations

from .auth_info import AuthInfo, default_config_dir
from .oauth_client import OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "default_config_dir"]
