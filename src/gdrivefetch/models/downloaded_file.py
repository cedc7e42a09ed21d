"""Downloaded file model and its wire payload."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True)
class DownloadedFile:
    """
    One file collected by a download.

    `path` is relative to the traversal root and ends with the final
    (possibly extension-appended) name. `size` is the length of `data`.
    """

    name: str
    path: str
    mime_type: str
    data: bytes
    original_name: Optional[str] = None
    original_mime_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def was_exported(self) -> bool:
        if self.original_mime_type is None:
            return False
        return self.mime_type != self.original_mime_type

    def to_payload(self) -> dict[str, Any]:
        """JSON-compatible dict with base64-encoded content."""
        return {
            "name": self.name,
            "path": self.path,
            "mimeType": self.mime_type,
            "size": self.size,
            "data": base64.b64encode(self.data).decode("ascii"),
            "originalName": self.original_name,
            "originalMimeType": self.original_mime_type,
            "wasExported": self.was_exported,
        }
