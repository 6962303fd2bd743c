"""Internal controller exports for wecaredrive."""

from __future__ import annotations

from .drive_controller import GoogleDriveController
from .executor import RequestExecutor, build_drive_service, parse_response, success_marker

__all__ = [
    "GoogleDriveController",
    "RequestExecutor",
    "build_drive_service",
    "parse_response",
    "success_marker",
]
