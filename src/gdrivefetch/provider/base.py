"""Abstract Drive capability consumed by the downloader."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO

from gdrivefetch.config import DriveOptions
from gdrivefetch.models import RemoteItem


class DriveProvider(ABC):
    """
    Remote storage operations needed to walk and download a folder tree.

    Implementations raise gdrivefetch errors (GDriveFetchError subclasses)
    on failure.
    """

    @abstractmethod
    def list_children(self, folder_id: str, options: DriveOptions) -> list[RemoteItem]:
        """List the immediate children of a folder (first page only)."""

    @abstractmethod
    def get_metadata(self, item_id: str, options: DriveOptions) -> RemoteItem:
        """Fetch name, MIME type, size and drive id of one item."""

    @abstractmethod
    def download_raw(self, item_id: str, options: DriveOptions) -> BinaryIO:
        """Return the stored bytes of a binary file."""

    @abstractmethod
    def export_as(
        self,
        item_id: str,
        target_mime_type: str,
        options: DriveOptions,
    ) -> BinaryIO:
        """Return a Workspace document converted to target_mime_type."""
