"""gdrivefetch public API."""

from __future__ import annotations

from gdrivefetch.auth import AuthInfo, OAuthClient
from gdrivefetch.config import DriveOptions
from gdrivefetch.downloader import export_or_download, walk
from gdrivefetch.errors import (
    ApiError,
    AuthError,
    GDriveFetchError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    map_http_error,
)
from gdrivefetch.manager import GoogleDriveDownloader
from gdrivefetch.models import DownloadedFile, FolderDownload, RemoteItem
from gdrivefetch.provider import DriveProvider, GoogleDriveProvider, InMemoryDriveProvider

__all__ = [
    # High-level
    "GoogleDriveDownloader",
    "DriveOptions",
    "walk",
    "export_or_download",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Providers
    "DriveProvider",
    "GoogleDriveProvider",
    "InMemoryDriveProvider",
    # Models
    "RemoteItem",
    "DownloadedFile",
    "FolderDownload",
    # Errors
    "GDriveFetchError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
