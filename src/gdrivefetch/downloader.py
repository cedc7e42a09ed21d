"""Recursive folder download: tree walk plus per-item export/download dispatch."""

from __future__ import annotations

import logging
from typing import Optional

from gdrivefetch.config import DriveOptions
from gdrivefetch.errors import GDriveFetchError
from gdrivefetch.models import DownloadedFile, RemoteItem
from gdrivefetch.provider import DriveProvider
from gdrivefetch.util.mime import (
    export_format_for,
    is_folder,
    looks_like_shared_drive_folder,
)

logger = logging.getLogger(__name__)


def fetch_file(
    provider: DriveProvider,
    item_id: str,
    display_path: str,
    options: DriveOptions,
) -> DownloadedFile:
    """
    Download one file, exporting Workspace documents.

    Workspace documents (Docs, Sheets, Slides, Forms, Drawings) are converted
    with the export API and get the target extension appended to both name
    and path. Everything else is downloaded as stored.

    Raises:
        GDriveFetchError: if metadata or content cannot be fetched.
    """
    meta = provider.get_metadata(item_id, options)
    return download_item(provider, meta, display_path, options)


def download_item(
    provider: DriveProvider,
    meta: RemoteItem,
    display_path: str,
    options: DriveOptions,
) -> DownloadedFile:
    """fetch_file for an item whose metadata is already known."""
    export = export_format_for(meta.mime_type)

    if export is not None:
        logger.debug("Exporting %s as %s", display_path, export.mime_type)
        stream = provider.export_as(meta.id, export.mime_type, options)
        name = export.apply_to(meta.name)
        path = export.apply_to(display_path)
        mime_type = export.mime_type
    else:
        stream = provider.download_raw(meta.id, options)
        name = meta.name
        path = display_path
        mime_type = meta.mime_type

    with stream:
        data = stream.read()

    return DownloadedFile(
        name=name,
        path=path,
        mime_type=mime_type,
        data=data,
        original_name=meta.name,
        original_mime_type=meta.mime_type,
    )


def export_or_download(
    provider: DriveProvider,
    item_id: str,
    display_path: str,
    options: DriveOptions = DriveOptions(),
) -> Optional[DownloadedFile]:
    """Like fetch_file, but a failure is logged and yields None."""
    try:
        return fetch_file(provider, item_id, display_path, options)
    except GDriveFetchError:
        logger.error(
            "Skipping file %s (id=%s)",
            display_path,
            item_id,
            exc_info=True,
        )
        return None


def is_traversable_folder(item: RemoteItem, options: DriveOptions) -> bool:
    if is_folder(item.mime_type):
        return True
    return looks_like_shared_drive_folder(
        item.mime_type,
        shared_drive_context=options.include_shared_drive_support,
    )


def walk(
    provider: DriveProvider,
    folder_id: str,
    current_path: str = "",
    options: DriveOptions = DriveOptions(),
) -> list[DownloadedFile]:
    """
    Download every file below folder_id, depth-first in listing order.

    Only the first page of each listing is used. A failure while listing
    ends this folder's contribution; files already collected are kept and
    the caller moves on to the next sibling.
    """
    downloaded: list[DownloadedFile] = []

    try:
        children = provider.list_children(folder_id, options)
    except GDriveFetchError:
        logger.error(
            "Skipping folder %s (id=%s)",
            current_path or "<root>",
            folder_id,
            exc_info=True,
        )
        return downloaded

    for child in children:
        child_path = f"{current_path}/{child.name}" if current_path else child.name

        if is_traversable_folder(child, options):
            logger.debug("Processing folder: %s", child_path)
            downloaded.extend(walk(provider, child.id, child_path, options))
            continue

        logger.debug("Downloading file: %s", child_path)
        result = export_or_download(provider, child.id, child_path, options)
        if result is not None:
            downloaded.append(result)

    return downloaded
