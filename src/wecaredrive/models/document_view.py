"""Display projection of a listed FileRecord."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from wecaredrive.util.mime import doc_type_label
from wecaredrive.util.naming import view_url

from .file_record import FileRecord


@dataclass(slots=True, frozen=True)
class DocumentView:
    file_id: str
    file_name: str
    doc_type: str
    file_size: str
    summary: str
    upload_date: str
    file_url: str
    category: str
    tags: list[str] = field(default_factory=list)


def format_file_size(size: Optional[int]) -> str:
    if not size:
        return "Unknown"
    return f"{round(size / 1024)} KB"


def document_view(record: FileRecord, *, fallback_category: str = "others") -> DocumentView:
    return DocumentView(
        file_id=record.file_id,
        file_name=record.name,
        doc_type=doc_type_label(record.mime_type),
        file_size=format_file_size(record.size),
        summary=record.description or "No description available",
        upload_date=record.created_time,
        file_url=record.file_url or view_url(record.file_id),
        category=record.category or fallback_category,
        tags=list(record.tags),
    )
