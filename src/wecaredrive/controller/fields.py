"""Field projections and query builders for Google Drive API requests."""

from __future__ import annotations

from wecaredrive.util.mime import FOLDER_MIME

SEARCH_FIELDS: str = "nextPageToken,files(id,name)"

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "size,"
    "createdTime,"
    "modifiedTime,"
    "webViewLink,"
    "webContentLink"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

ABOUT_FIELDS: str = "user"

ROOT_PARENT: str = "root"


def quote(value: str) -> str:
    """Quote a string literal for a Drive query (backslash and single quote escaped)."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def named_child_query(name: str, parent_id: str | None = None) -> str:
    """name='<name>' and '<parent>' in parents and trashed=false"""
    parent = parent_id or ROOT_PARENT
    return f"name={quote(name)} and {quote(parent)} in parents and trashed=false"


def children_query(parent_id: str) -> str:
    """'<parent>' in parents and trashed=false"""
    return f"{quote(parent_id)} in parents and trashed=false"


def named_folder_query(name: str, parent_id: str | None = None) -> str:
    """Like named_child_query() but matching folders only."""
    return f"{named_child_query(name, parent_id)} and mimeType={quote(FOLDER_MIME)}"
