from .mime import (
    EXPORT_FORMATS,
    FOLDER_MIME,
    ExportFormat,
    export_format_for,
    is_folder,
    is_google_app,
    looks_like_shared_drive_folder,
)

__all__ = [
    "EXPORT_FORMATS",
    "FOLDER_MIME",
    "ExportFormat",
    "export_format_for",
    "is_folder",
    "is_google_app",
    "looks_like_shared_drive_folder",
]
