"""GoogleDriveDownloader: boundary operations for file and folder downloads."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gdrivefetch.auth import AuthInfo
from gdrivefetch.config import SHARED_DRIVE_OPTIONS, DriveOptions
from gdrivefetch.downloader import download_item, walk
from gdrivefetch.errors import InvalidArgumentError
from gdrivefetch.models import DownloadedFile, FolderDownload, RemoteItem
from gdrivefetch.provider import DriveProvider, GoogleDriveProvider
from gdrivefetch.util.mime import is_folder

logger = logging.getLogger(__name__)


class GoogleDriveDownloader:
    """High-level entry point: list a folder, download a file or a whole folder."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        options: Optional[DriveOptions] = None,
    ) -> None:
        self._provider: DriveProvider = GoogleDriveProvider(auth_info, scopes=scopes)
        self._options = options or DriveOptions()

    @classmethod
    def from_provider(
        cls,
        provider: DriveProvider,
        *,
        options: Optional[DriveOptions] = None,
    ) -> "GoogleDriveDownloader":
        """Create downloader with an injected provider (useful for tests)."""
        obj = cls.__new__(cls)
        obj._provider = provider
        obj._options = options or DriveOptions()
        return obj

    def list_folder_contents(self, folder_id: str) -> list[RemoteItem]:
        """Return the immediate children of folder_id."""
        _require_id(folder_id, "folder_id")
        return self._provider.list_children(folder_id, self._options)

    def download_single_file(self, file_id: str) -> DownloadedFile:
        """
        Download one file (exporting Workspace documents).

        Raises:
            InvalidArgumentError: if file_id is empty or names a folder.
            GDriveFetchError: if the file cannot be fetched.
        """
        _require_id(file_id, "file_id")
        meta = self._provider.get_metadata(file_id, self._options)
        if is_folder(meta.mime_type):
            raise InvalidArgumentError(
                "file_id must not be a folder",
                details={"file_id": file_id},
            )
        return download_item(self._provider, meta, meta.name, self._options)

    def download_folder(self, folder_id: str) -> FolderDownload:
        """
        Recursively download everything under folder_id.

        Only a failure to read the folder's own metadata is raised; errors
        below it are logged and the affected items left out.
        """
        _require_id(folder_id, "folder_id")
        root = self._provider.get_metadata(folder_id, SHARED_DRIVE_OPTIONS)
        is_shared_drive = bool(root.drive_id)

        logger.info(
            "Starting recursive download of folder: %s (%s)",
            root.name,
            "Shared Drive" if is_shared_drive else "Personal Drive",
        )

        options = DriveOptions(include_shared_drive_support=is_shared_drive)
        files = walk(self._provider, folder_id, "", options)

        logger.info("Download complete. Total files: %d", len(files))
        return FolderDownload(
            folder_name=root.name,
            files=files,
            is_shared_drive_context=is_shared_drive,
        )


def _require_id(value: str, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty string")
