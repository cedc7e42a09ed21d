"""OAuth client utilities for gdrivefetch."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from gdrivefetch.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

READONLY_SCOPE: str = "https://www.googleapis.com/auth/drive.readonly"


class OAuthClient:
    """Create OAuth credentials and Drive API service objects."""

    def __init__(self, auth_info: AuthInfo) -> None:
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Return OAuth credentials for the given scopes.

        Args:
            scopes: OAuth scopes.
            ensure_valid: If True, refresh credentials when possible.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on load/refresh/flow failures.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        try:
            from google.oauth2.credentials import Credentials
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth and google-auth-oauthlib"},
                cause=exc,
            ) from exc

        if self._auth_info.kind == "token":
            try:
                creds = Credentials.from_authorized_user_info(
                    self._auth_info.token_info,
                    scopes=list(scopes),
                )
            except Exception as exc:
                raise AuthError("Failed to load OAuth tokens", cause=exc) from exc
            if ensure_valid:
                self._refresh_if_needed(creds)
            return creds

        token_file = self._auth_info.token_file

        if os.path.exists(token_file):
            try:
                creds = Credentials.from_authorized_user_file(
                    token_file,
                    scopes=list(scopes),
                )
            except Exception as exc:
                raise AuthError(
                    "Failed to load token_file",
                    details={"token_file": token_file},
                    cause=exc,
                ) from exc

            if not ensure_valid:
                return creds

            if self._refresh_if_needed(creds):
                self._save_credentials(creds)

            if creds.valid:
                return creds

        return self._run_flow(scopes)

    def build_drive_service(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Build a Drive API v3 service resource.

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

    def _refresh_if_needed(self, creds) -> bool:
        """Refresh expired credentials. Returns True when a refresh happened."""
        if creds.valid or not creds.refresh_token:
            return False

        from google.auth.transport.requests import Request

        try:
            creds.refresh(Request())
        except Exception as exc:
            raise AuthError("Failed to refresh OAuth credentials", cause=exc) from exc
        logger.debug("Refreshed OAuth credentials")
        return True

    def _run_flow(self, scopes: Sequence[str]):
        try:
            from google_auth_oauthlib.flow import InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-auth-oauthlib is not available",
                cause=exc,
            ) from exc

        client_secrets = self._auth_info.client_secrets_file
        token_file = self._auth_info.token_file
        logger.info("Starting OAuth authorization flow")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                client_secrets,
                scopes=list(scopes),
            )
            creds = flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={
                    "client_secrets_file": client_secrets,
                    "token_file": token_file,
                },
                cause=exc,
            ) from exc

        self._save_credentials(creds)
        return creds

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        if token_dir:
            os.makedirs(token_dir, exist_ok=True)

        try:
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except Exception as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
