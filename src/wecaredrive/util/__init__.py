from .mime import DEFAULT_MIME, FOLDER_MIME, JSON_MIME, doc_type_label
from .naming import SIDECAR_SUFFIX, sidecar_name, view_url
from .time import now_rfc3339, now_utc, parse_rfc3339, rfc3339_after, to_rfc3339

__all__ = [
    "FOLDER_MIME",
    "JSON_MIME",
    "DEFAULT_MIME",
    "doc_type_label",
    "SIDECAR_SUFFIX",
    "sidecar_name",
    "view_url",
    "now_utc",
    "now_rfc3339",
    "parse_rfc3339",
    "to_rfc3339",
    "rfc3339_after",
]
