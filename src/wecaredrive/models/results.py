"""Result models returned to callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class UploadResult:
    """Outcome of an upload. Failures are reported here rather than raised."""

    success: bool
    file_id: Optional[str] = None
    metadata_id: Optional[str] = None
    error: Optional[str] = None


@dataclass(slots=True, frozen=True)
class FolderStatus:
    """Diagnostic snapshot of the session's token and cached folder ids."""

    has_access_token: bool
    root_folder_id: Optional[str] = None
    docs_folder_id: Optional[str] = None
    metadata_folder_id: Optional[str] = None
    settings_folder_id: Optional[str] = None
