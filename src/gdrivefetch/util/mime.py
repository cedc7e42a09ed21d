"""MIME type helpers and the Google Workspace export mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FOLDER_MIME: str = "application/vnd.google-apps.folder"
SHORTCUT_MIME: str = "application/vnd.google-apps.shortcut"

DOCUMENT_MIME: str = "application/vnd.google-apps.document"
SPREADSHEET_MIME: str = "application/vnd.google-apps.spreadsheet"
PRESENTATION_MIME: str = "application/vnd.google-apps.presentation"
FORM_MIME: str = "application/vnd.google-apps.form"
DRAWING_MIME: str = "application/vnd.google-apps.drawing"

PDF_MIME: str = "application/pdf"
XLSX_MIME: str = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
PPTX_MIME: str = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
PNG_MIME: str = "image/png"

_GOOGLE_APPS_PREFIX: str = "application/vnd.google-apps."


@dataclass(frozen=True)
class ExportFormat:
    """Target of a Workspace export: MIME type and the extension appended to the name."""

    mime_type: str
    extension: str

    def apply_to(self, name: str) -> str:
        return f"{name}{self.extension}"


EXPORT_FORMATS: dict[str, ExportFormat] = {
    DOCUMENT_MIME: ExportFormat(PDF_MIME, ".pdf"),
    SPREADSHEET_MIME: ExportFormat(XLSX_MIME, ".xlsx"),
    PRESENTATION_MIME: ExportFormat(PPTX_MIME, ".pptx"),
    FORM_MIME: ExportFormat(PDF_MIME, ".pdf"),
    DRAWING_MIME: ExportFormat(PNG_MIME, ".png"),
}


def export_format_for(mime_type: str) -> Optional[ExportFormat]:
    """Return the export target for a native Workspace type, or None for verbatim download."""
    return EXPORT_FORMATS.get(mime_type)


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    """Returns True if the MIME type is a Google 'apps' type."""
    return mime_type.startswith(_GOOGLE_APPS_PREFIX)


def looks_like_shared_drive_folder(mime_type: str, *, shared_drive_context: bool) -> bool:
    """
    Heuristic for shared-drive folders listed without a MIME type.

    Some shared-drive listings omit mimeType for folders. When traversing a
    shared drive, an item with no MIME type is treated as a folder. This is
    provider-version dependent and only applies in a shared-drive context.
    """
    return shared_drive_context and not mime_type
