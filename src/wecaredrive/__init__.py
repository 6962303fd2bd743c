"""wecaredrive public API."""

from __future__ import annotations

from wecaredrive.auth import AuthInfo, OAuthClient, TokenPair
from wecaredrive.config import DriveStoreConfig
from wecaredrive.errors import (
    AuthError,
    FileTooLargeError,
    FolderInitializationError,
    InvalidArgumentError,
    MetadataNotFoundError,
    MetadataUnreadableError,
    RemoteApiError,
    SessionExpiredError,
    UnauthenticatedError,
    UploadResponseMalformedError,
    WeCareDriveError,
)
from wecaredrive.logging_config import setup_logging
from wecaredrive.manager import WeCareDriveService
from wecaredrive.models import (
    DocumentView,
    FilePayload,
    FileRecord,
    FolderStatus,
    MetadataUpdate,
    UploadResult,
)
from wecaredrive.session import DriveSession, FolderIds

__all__ = [
    # High-level
    "WeCareDriveService",
    "DriveSession",
    "FolderIds",
    "DriveStoreConfig",
    "setup_logging",
    # Auth
    "AuthInfo",
    "OAuthClient",
    "TokenPair",
    # Models
    "FileRecord",
    "FilePayload",
    "MetadataUpdate",
    "UploadResult",
    "FolderStatus",
    "DocumentView",
    # Errors
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
]
