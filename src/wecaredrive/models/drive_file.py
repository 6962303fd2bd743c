"""Data model for native Drive file attributes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(slots=True)
class DriveFile:
    """
    A Drive item as reported by files.list / files.create.

    Timestamps are kept as the RFC3339 strings Drive returns, since they are
    copied verbatim into fallback records.
    """

    file_id: str
    name: str
    mime_type: str = ""
    size: int = 0
    created_time: Optional[str] = None
    modified_time: Optional[str] = None
    web_view_link: Optional[str] = None
    web_content_link: Optional[str] = None
    parents: list[str] = field(default_factory=list)


def drive_file_from_dict(data: dict[str, Any]) -> DriveFile:
    """Convert a Drive API file resource into DriveFile (tolerant of missing fields)."""
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []

    # Drive reports size as a decimal string; Google-apps types have none.
    size = 0
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    def _opt_str(key: str) -> Optional[str]:
        value = data.get(key)
        return value if isinstance(value, str) and value else None

    return DriveFile(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        size=size,
        created_time=_opt_str("createdTime"),
        modified_time=_opt_str("modifiedTime"),
        web_view_link=_opt_str("webViewLink"),
        web_content_link=_opt_str("webContentLink"),
        parents=list(parents) if isinstance(parents, list) else [],
    )
