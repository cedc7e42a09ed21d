"""Per-call options for Drive requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class DriveOptions:
    """
    Options applied to every provider call of one operation.

    Attributes:
        include_shared_drive_support: Send shared-drive flags with each request
            and enable the missing-MIME-type folder heuristic during traversal.
    """

    include_shared_drive_support: bool = False

    def request_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for files().get / get_media / export_media."""
        if not self.include_shared_drive_support:
            return {}
        return {"supportsAllDrives": True}

    def list_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for files().list."""
        if not self.include_shared_drive_support:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}


SHARED_DRIVE_OPTIONS = DriveOptions(include_shared_drive_support=True)
