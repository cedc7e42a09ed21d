"""Google Drive API provider."""

from __future__ import annotations

import io
import json
from typing import Any, BinaryIO, Callable, Optional, Sequence, TypeVar

from gdrivefetch.auth import READONLY_SCOPE, AuthInfo, OAuthClient
from gdrivefetch.config import DriveOptions
from gdrivefetch.errors import (
    ApiError,
    AuthError,
    GDriveFetchError,
    HttpErrorInfo,
    NetworkError,
    map_http_error,
)
from gdrivefetch.models import RemoteItem

from .base import DriveProvider
from .fields import FILE_FIELDS, LIST_FIELDS

T = TypeVar("T")


class GoogleDriveProvider(DriveProvider):
    """
    DriveProvider backed by the Drive v3 API.

    Notes:
        - The Drive `service` object is NOT exposed.
        - Every request is issued once; failures are mapped and raised.
    """

    DEFAULT_SCOPES: tuple[str, ...] = (READONLY_SCOPE,)

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
    def from_service(cls, service: Any) -> "GoogleDriveProvider":
        """Create provider from a pre-built Drive service (useful for tests)."""
        obj = cls.__new__(cls)
        obj._service = service
        return obj

    # ----------------------------
    # DriveProvider
    # ----------------------------
    def list_children(self, folder_id: str, options: DriveOptions) -> list[RemoteItem]:
        req = self._service.files().list(
            q=f"'{folder_id}' in parents",
            fields=LIST_FIELDS,
            **options.list_kwargs(),
        )
        data = self._execute(req.execute)
        return [RemoteItem.from_api(f) for f in data.get("files", []) or []]

    def get_metadata(self, item_id: str, options: DriveOptions) -> RemoteItem:
        req = self._service.files().get(
            fileId=item_id,
            fields=FILE_FIELDS,
            **options.request_kwargs(),
        )
        data = self._execute(req.execute)
        return RemoteItem.from_api(data)

    def download_raw(self, item_id: str, options: DriveOptions) -> BinaryIO:
        req = self._service.files().get_media(
            fileId=item_id,
            **options.request_kwargs(),
        )
        return self._drain(req)

    def export_as(
        self,
        item_id: str,
        target_mime_type: str,
        options: DriveOptions,
    ) -> BinaryIO:
        # files.export takes no shared-drive flags.
        req = self._service.files().export_media(
            fileId=item_id,
            mimeType=target_mime_type,
        )
        return self._drain(req)

    # ----------------------------
    # Internals
    # ----------------------------
    def _drain(self, request: Any) -> BinaryIO:
        try:
            from googleapiclient.http import MediaIoBaseDownload
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-api-python-client is not available",
                cause=exc,
            ) from exc

        buffer = io.BytesIO()
        downloader = MediaIoBaseDownload(buffer, request)
        done = False
        while not done:
            _, done = self._execute(downloader.next_chunk)
        buffer.seek(0)
        return buffer

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except GDriveFetchError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
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


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
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
