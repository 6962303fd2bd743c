"""Exception hierarchy and HTTP error mapping for wecaredrive."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


class WeCareDriveError(Exception):
    """
    Base exception for wecaredrive.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class UnauthenticatedError(WeCareDriveError):
    """Raised when an operation needs an access token and none is held."""

    def __init__(self, message: str = "Not authenticated: no access token available", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class SessionExpiredError(WeCareDriveError):
    """Raised when the held token is rejected by validation (re-login required)."""

    def __init__(self, message: str = "Session expired, please log in again", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class RemoteApiError(WeCareDriveError):
    """Raised for a non-success response (or transport failure) from Drive."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        *,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        merged: dict[str, Any] = {"status_code": status_code}
        if details:
            merged.update(details)
        super().__init__(
            message or f"Operation failed: Google Drive API error: {status_code} - {body}",
            details=merged,
            cause=cause,
        )
        self.status_code = status_code
        self.body = body


class FolderInitializationError(WeCareDriveError):
    """Raised when any step of the four-folder bootstrap fails."""


class FileTooLargeError(WeCareDriveError):
    """Raised locally when a payload exceeds the configured size ceiling."""


class MetadataNotFoundError(WeCareDriveError):
    """Raised when a metadata update targets a file without a sidecar."""


class UploadResponseMalformedError(WeCareDriveError):
    """Raised when Drive accepted an upload but returned no file id."""


class MetadataUnreadableError(WeCareDriveError):
    """Raised when a sidecar exists but its body is not a usable record."""


class AuthError(WeCareDriveError):
    """Raised when OAuth login/refresh fails for reasons other than a rejected grant."""


class InvalidArgumentError(WeCareDriveError):
    """Raised when caller arguments are invalid."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information extracted from a Drive error response."""

    status_code: int
    body: str = ""
    reason: str | None = None
    message: str | None = None


def http_error_info(status_code: Any, content: Any, reason: Any = None) -> HttpErrorInfo:
    """
    Build HttpErrorInfo from a raw status/body pair.

    Google error bodies look like {"error": {"message": ..., "errors": [{"reason": ...}]}};
    the message and first reason are lifted out when present.
    """
    if isinstance(content, (bytes, bytearray)):
        body = content.decode("utf-8", errors="replace")
    elif isinstance(content, str):
        body = content
    else:
        body = ""

    message = None
    if body:
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
            err = payload["error"]
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    return HttpErrorInfo(
        status_code=status_code if isinstance(status_code, int) else 0,
        body=body,
        reason=reason if isinstance(reason, str) else None,
        message=message if isinstance(message, str) else None,
    )


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> RemoteApiError:
    """
    Map an HTTP error to RemoteApiError.

    Every non-success status maps to RemoteApiError; session expiry is decided
    by explicit token validation, never inferred from a 401 here.
    """
    details: dict[str, Any] = {}
    if info.reason:
        details["reason"] = info.reason
    if info.message:
        details["api_message"] = info.message
    return RemoteApiError(info.status_code, info.body, details=details, cause=cause)
