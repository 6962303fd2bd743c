"""Deletion of a content file together with its sidecar."""

from __future__ import annotations

import logging

from wecaredrive.controller import GoogleDriveController
from wecaredrive.errors import WeCareDriveError

from .metadata import MetadataStore

logger = logging.getLogger(__name__)


class DeletionCoordinator:
    def __init__(self, controller: GoogleDriveController, metadata: MetadataStore) -> None:
        self._controller = controller
        self._metadata = metadata

    def delete(self, file_id: str) -> bool:
        """
        Delete the content file, then its sidecar.

        Returns False without a token. A failure deleting the content file
        raises RemoteApiError and leaves the sidecar alone. Once the content
        file is gone the call succeeds even if the sidecar cannot be removed;
        such a sidecar stays behind as an orphan in the metadata folder.
        """
        if not self._controller.session.has_token:
            return False

        self._controller.delete(file_id)

        try:
            removed = self._metadata.delete(file_id)
        except WeCareDriveError as exc:
            logger.warning("Deleted %s but its metadata could not be removed: %s", file_id, exc)
            return True

        if not removed:
            logger.debug("Deleted %s; it had no metadata", file_id)
        return True
