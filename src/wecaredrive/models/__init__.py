"""Public model exports for wecaredrive."""

from __future__ import annotations

from .document_view import DocumentView, document_view, format_file_size
from .drive_file import DriveFile, drive_file_from_dict
from .file_record import FileRecord, MetadataUpdate
from .payload import FilePayload, UploadOptions
from .results import FolderStatus, UploadResult
from .sidecar import SidecarFound, SidecarLookup, SidecarMissing

__all__ = [
    "DriveFile",
    "drive_file_from_dict",
    "FileRecord",
    "MetadataUpdate",
    "FilePayload",
    "UploadOptions",
    "UploadResult",
    "FolderStatus",
    "SidecarFound",
    "SidecarMissing",
    "SidecarLookup",
    "DocumentView",
    "document_view",
    "format_file_size",
]
