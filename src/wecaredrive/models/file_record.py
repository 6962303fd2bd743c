"""Sidecar metadata record for a content file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

# Keys owned by FileRecord; anything else found in a sidecar is carried in `extra`.
_RECORD_KEYS: frozenset[str] = frozenset(
    {
        "id",
        "name",
        "mimeType",
        "size",
        "createdTime",
        "modifiedTime",
        "description",
        "tags",
        "category",
        "fileUrl",
    }
)


@dataclass(slots=True)
class FileRecord:
    """
    Metadata for one content file, persisted as `<fileId>_metadata.json`.

    Notes:
        - `file_id` always equals the content file's Drive id.
        - `file_url` is derived at listing time and never persisted.
        - `extra` keeps unknown sidecar keys so a rewrite does not drop them.
    """

    file_id: str
    name: str
    mime_type: str
    size: int
    created_time: str
    modified_time: str

    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    category: Optional[str] = None
    file_url: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.file_id, str) or not self.file_id:
            raise ValueError("FileRecord.file_id must be a non-empty string")
        if not isinstance(self.size, int) or self.size < 0:
            raise ValueError("FileRecord.size must be a non-negative integer")

    def to_dict(self) -> dict[str, Any]:
        """Sidecar JSON object (camelCase keys, without fileUrl)."""
        data: dict[str, Any] = dict(self.extra)
        data.update(
            {
                "id": self.file_id,
                "name": self.name,
                "mimeType": self.mime_type,
                "size": self.size,
                "createdTime": self.created_time,
                "modifiedTime": self.modified_time,
                "tags": list(self.tags),
            }
        )
        if self.description is not None:
            data["description"] = self.description
        if self.category is not None:
            data["category"] = self.category
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "FileRecord":
        """
        Parse a sidecar JSON object.

        Raises:
            ValueError: if `data` is not an object or carries no usable id.
        """
        if not isinstance(data, dict):
            raise ValueError("sidecar body must be a JSON object")

        file_id = data.get("id")
        if not isinstance(file_id, str) or not file_id:
            raise ValueError("sidecar has no 'id'")

        size = data.get("size", 0)
        if isinstance(size, str) and size.isdigit():
            size = int(size)
        if not isinstance(size, int) or isinstance(size, bool) or size < 0:
            size = 0

        tags = data.get("tags") or []
        if not isinstance(tags, list):
            tags = []

        description = data.get("description")
        category = data.get("category")

        return cls(
            file_id=file_id,
            name=str(data.get("name") or ""),
            mime_type=str(data.get("mimeType") or ""),
            size=size,
            created_time=str(data.get("createdTime") or ""),
            modified_time=str(data.get("modifiedTime") or ""),
            description=description if isinstance(description, str) else None,
            tags=[str(t) for t in tags],
            category=category if isinstance(category, str) else None,
            extra={k: v for k, v in data.items() if k not in _RECORD_KEYS},
        )


@dataclass(slots=True)
class MetadataUpdate:
    """Partial fields for a metadata update. Fields left as None are not touched."""

    name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    category: Optional[str] = None

    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.description is None
            and self.tags is None
            and self.category is None
        )
