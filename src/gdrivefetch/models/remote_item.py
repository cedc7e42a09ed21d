"""Data model for Drive items as returned by the provider."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(slots=True)
class RemoteItem:
    """
    A node of the Drive file graph (file, folder, shortcut, ...).

    Notes:
        - `mime_type` is "" when the API omitted it.
        - Items are fetched per request and never cached.
    """

    id: str
    name: str
    mime_type: str = ""
    size: Optional[int] = None
    parents: list[str] = field(default_factory=list)
    drive_id: Optional[str] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RemoteItem":
        """Build from a Drive v3 `files` resource dict."""
        item_id = data.get("id")
        name = data.get("name")
        mime_type = data.get("mimeType")
        parents = data.get("parents")
        drive_id = data.get("driveId")

        size = None
        if isinstance(data.get("size"), str) and data["size"].isdigit():
            size = int(data["size"])
        elif isinstance(data.get("size"), int):
            size = data["size"]

        return cls(
            id=item_id if isinstance(item_id, str) else "",
            name=name if isinstance(name, str) else "",
            mime_type=mime_type if isinstance(mime_type, str) else "",
            size=size,
            parents=list(parents) if isinstance(parents, list) else [],
            drive_id=drive_id if isinstance(drive_id, str) and drive_id else None,
        )
