"""Public auth exports for gdrivefetch."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import READONLY_SCOPE, OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "READONLY_SCOPE"]
