"""Deterministic object names used on Drive."""

from __future__ import annotations

SIDECAR_SUFFIX: str = "_metadata.json"
VIEW_URL_TEMPLATE: str = "https://drive.google.com/file/d/{file_id}/view"


def sidecar_name(file_id: str) -> str:
    """Name of the metadata sidecar paired with a content file."""
    if not isinstance(file_id, str) or not file_id.strip():
        raise ValueError("file_id must be a non-empty string")
    return f"{file_id}{SIDECAR_SUFFIX}"


def view_url(file_id: str, web_view_link: str | None = None, *, template: str = VIEW_URL_TEMPLATE) -> str:
    """Viewer URL for a content file: Drive's own link, else a constructed one."""
    if web_view_link:
        return web_view_link
    return template.format(file_id=file_id)
