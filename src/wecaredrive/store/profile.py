"""Singleton user profile stored as settings/profile.json."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController
from wecaredrive.controller.fields import named_child_query
from wecaredrive.errors import RemoteApiError
from wecaredrive.models import DriveFile
from wecaredrive.util.mime import JSON_MIME

from .folders import FolderProvisioner

logger = logging.getLogger(__name__)


class ProfileStore:
    """
    The same sidecar pattern applied to one settings object.

    Saving writes the new profile first and then removes older copies, so a
    failed save leaves the previous profile readable.
    """

    def __init__(
        self,
        controller: GoogleDriveController,
        provisioner: FolderProvisioner,
        config: DriveStoreConfig,
    ) -> None:
        self._controller = controller
        self._provisioner = provisioner
        self._config = config

    def save(self, profile: Mapping[str, Any]) -> bool:
        existing = self._find_all()
        settings_id = self._provisioner.ensure_folder_structure().settings
        body = json.dumps(dict(profile), indent=2, ensure_ascii=False).encode("utf-8")

        try:
            self._controller.upload(body, self._config.profile_file_name, settings_id, mime_type=JSON_MIME)
        except RemoteApiError as exc:
            logger.warning("Saving profile failed: %s", exc)
            return False

        for stale in existing:
            try:
                self._controller.delete(stale.file_id)
            except RemoteApiError as exc:
                logger.warning("Could not remove previous profile %s: %s", stale.file_id, exc)
        return True

    def load(self) -> Optional[dict[str, Any]]:
        """The stored profile, or None when absent or not a JSON object."""
        matches = self._find_all()
        if not matches:
            return None
        data = self._controller.read_content(matches[0].file_id)
        if not isinstance(data, dict):
            return None
        return data

    def _find_all(self) -> list[DriveFile]:
        settings_id = self._provisioner.ensure_folder_structure().settings
        return self._controller.find(
            named_child_query(self._config.profile_file_name, settings_id),
            order_by="modifiedTime desc",
        )
