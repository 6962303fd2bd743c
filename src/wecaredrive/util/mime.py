from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
JSON_MIME: str = "application/json"
DEFAULT_MIME: str = "application/octet-stream"


def doc_type_label(mime_type: str) -> str:
    """
    Short document-type label used by the document list.

    PDFs are "PDF", any image is "JPG", everything else is "DOC".
    """
    mime = (mime_type or "").lower()
    if "pdf" in mime:
        return "PDF"
    if "image" in mime:
        return "JPG"
    return "DOC"
