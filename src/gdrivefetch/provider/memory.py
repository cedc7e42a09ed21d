"""In-memory DriveProvider for tests and offline use."""

from __future__ import annotations

import io
from typing import BinaryIO, Optional

from gdrivefetch.config import DriveOptions
from gdrivefetch.errors import GDriveFetchError, InvalidArgumentError, NotFoundError
from gdrivefetch.models import RemoteItem
from gdrivefetch.util.mime import FOLDER_MIME, is_google_app

from .base import DriveProvider

OPERATIONS: tuple[str, ...] = ("list_children", "get_metadata", "download_raw", "export_as")


class InMemoryDriveProvider(DriveProvider):
    """
    Dict-backed Drive tree.

    Children are listed in insertion order. Failures can be injected per
    operation and item id with `fail()`. Every call is recorded in `calls`
    as (operation, item_id, options).
    """

    def __init__(self) -> None:
        self._items: dict[str, RemoteItem] = {}
        self._order: list[str] = []
        self._contents: dict[str, bytes] = {}
        self._exports: dict[tuple[str, str], bytes] = {}
        self._failures: dict[tuple[str, str], GDriveFetchError] = {}
        self.calls: list[tuple[str, str, DriveOptions]] = []

    # ----------------------------
    # Tree building
    # ----------------------------
    def add_item(self, item: RemoteItem, data: Optional[bytes] = None) -> RemoteItem:
        if item.id in self._items:
            raise InvalidArgumentError("Duplicate item id", details={"item_id": item.id})
        self._items[item.id] = item
        self._order.append(item.id)
        if data is not None:
            self._contents[item.id] = data
        return item

    def add_folder(
        self,
        item_id: str,
        name: str,
        parent_id: Optional[str] = None,
        *,
        drive_id: Optional[str] = None,
        mime_type: str = FOLDER_MIME,
    ) -> RemoteItem:
        parents = [parent_id] if parent_id else []
        return self.add_item(
            RemoteItem(
                id=item_id,
                name=name,
                mime_type=mime_type,
                parents=parents,
                drive_id=drive_id,
            )
        )

    def add_file(
        self,
        item_id: str,
        name: str,
        mime_type: str,
        data: bytes = b"",
        parent_id: Optional[str] = None,
        *,
        drive_id: Optional[str] = None,
        exports: Optional[dict[str, bytes]] = None,
    ) -> RemoteItem:
        parents = [parent_id] if parent_id else []
        # Workspace documents have no stored size.
        size = None if is_google_app(mime_type) else len(data)
        item = self.add_item(
            RemoteItem(
                id=item_id,
                name=name,
                mime_type=mime_type,
                size=size,
                parents=parents,
                drive_id=drive_id,
            ),
            data,
        )
        for target, payload in (exports or {}).items():
            self._exports[(item_id, target)] = payload
        return item

    def fail(
        self,
        operation: str,
        item_id: str,
        error: Optional[GDriveFetchError] = None,
    ) -> None:
        """Make `operation` raise for `item_id`."""
        if operation not in OPERATIONS:
            raise InvalidArgumentError("Unknown operation", details={"operation": operation})
        self._failures[(operation, item_id)] = error or GDriveFetchError(
            f"Injected failure: {operation}",
            details={"item_id": item_id},
        )

    # ----------------------------
    # DriveProvider
    # ----------------------------
    def list_children(self, folder_id: str, options: DriveOptions) -> list[RemoteItem]:
        self._record("list_children", folder_id, options)
        if folder_id not in self._items:
            raise NotFoundError("Folder not found", details={"item_id": folder_id})
        return [
            self._items[item_id]
            for item_id in self._order
            if folder_id in self._items[item_id].parents
        ]

    def get_metadata(self, item_id: str, options: DriveOptions) -> RemoteItem:
        self._record("get_metadata", item_id, options)
        return self._get(item_id)

    def download_raw(self, item_id: str, options: DriveOptions) -> BinaryIO:
        self._record("download_raw", item_id, options)
        item = self._get(item_id)
        if is_google_app(item.mime_type):
            raise InvalidArgumentError(
                "Only files with binary content can be downloaded",
                details={"item_id": item_id, "mime_type": item.mime_type},
            )
        return io.BytesIO(self._contents.get(item_id, b""))

    def export_as(
        self,
        item_id: str,
        target_mime_type: str,
        options: DriveOptions,
    ) -> BinaryIO:
        self._record("export_as", item_id, options)
        item = self._get(item_id)
        if not is_google_app(item.mime_type):
            raise InvalidArgumentError(
                "Export only supports Docs Editors files",
                details={"item_id": item_id, "mime_type": item.mime_type},
            )
        key = (item_id, target_mime_type)
        if key in self._exports:
            return io.BytesIO(self._exports[key])
        return io.BytesIO(self._contents.get(item_id, b""))

    # ----------------------------
    # Internals
    # ----------------------------
    def _record(self, operation: str, item_id: str, options: DriveOptions) -> None:
        self.calls.append((operation, item_id, options))
        failure = self._failures.get((operation, item_id))
        if failure is not None:
            raise failure

    def _get(self, item_id: str) -> RemoteItem:
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError("File not found", details={"item_id": item_id})
        return item
