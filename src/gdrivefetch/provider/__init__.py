"""Drive provider implementations."""

from __future__ import annotations

from .base import DriveProvider
from .google import GoogleDriveProvider
from .memory import InMemoryDriveProvider

__all__ = ["DriveProvider", "GoogleDriveProvider", "InMemoryDriveProvider"]
