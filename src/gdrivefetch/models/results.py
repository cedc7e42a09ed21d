"""Result model for folder downloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .downloaded_file import DownloadedFile


@dataclass(slots=True)
class FolderDownload:
    """Aggregate result of a recursive folder download."""

    folder_name: str
    files: list[DownloadedFile] = field(default_factory=list)
    is_shared_drive_context: bool = False

    @property
    def total_files(self) -> int:
        return len(self.files)

    def to_payload(self) -> dict[str, Any]:
        return {
            "folderName": self.folder_name,
            "totalFiles": self.total_files,
            "files": [f.to_payload() for f in self.files],
            "isSharedDrive": self.is_shared_drive_context,
        }
