"""Public model exports for gdrivefetch."""

from __future__ import annotations

from .downloaded_file import DownloadedFile
from .remote_item import RemoteItem
from .results import FolderDownload

__all__ = [
    "RemoteItem",
    "DownloadedFile",
    "FolderDownload",
]
