"""Upload input types."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

from wecaredrive.util.mime import DEFAULT_MIME


@dataclass(slots=True, frozen=True)
class FilePayload:
    """
    Binary content to upload.

    `size` defaults to len(content); callers streaming from elsewhere may
    declare it explicitly (the size ceiling is checked against it).
    """

    content: bytes
    name: str
    mime_type: str = DEFAULT_MIME
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, (bytes, bytearray)):
            raise TypeError("FilePayload.content must be bytes")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("FilePayload.name must be a non-empty string")
        if self.size is None:
            object.__setattr__(self, "size", len(self.content))
        elif self.size < 0:
            raise ValueError("FilePayload.size must be non-negative")

    @property
    def byte_size(self) -> int:
        return int(self.size or 0)

    @classmethod
    def from_path(cls, path: str, *, mime_type: Optional[str] = None) -> "FilePayload":
        """Read a local file; the MIME type is guessed from the extension when not given."""
        with open(path, "rb") as f:
            content = f.read()
        guessed, _ = mimetypes.guess_type(path)
        return cls(
            content=content,
            name=os.path.basename(path),
            mime_type=mime_type or guessed or DEFAULT_MIME,
        )


@dataclass(slots=True)
class UploadOptions:
    """Optional metadata supplied with an upload."""

    display_name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    category: Optional[str] = None
