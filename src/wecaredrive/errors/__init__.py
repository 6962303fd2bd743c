"""Public error exports for wecaredrive."""

from __future__ import annotations

from .exceptions import (
    AuthError,
    FileTooLargeError,
    FolderInitializationError,
    HttpErrorInfo,
    InvalidArgumentError,
    MetadataNotFoundError,
    MetadataUnreadableError,
    RemoteApiError,
    SessionExpiredError,
    UnauthenticatedError,
    UploadResponseMalformedError,
    WeCareDriveError,
    http_error_info,
    map_http_error,
)

__all__ = [
    "WeCareDriveError",
    "UnauthenticatedError",
    "SessionExpiredError",
    "RemoteApiError",
    "FolderInitializationError",
    "FileTooLargeError",
    "MetadataNotFoundError",
    "MetadataUnreadableError",
    "UploadResponseMalformedError",
    "AuthError",
    "InvalidArgumentError",
    "HttpErrorInfo",
    "http_error_info",
    "map_http_error",
]
