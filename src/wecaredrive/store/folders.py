"""Idempotent provisioning of the wecare folder tree."""

from __future__ import annotations

import logging
from typing import Optional

from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController
from wecaredrive.controller.fields import named_folder_query
from wecaredrive.errors import FolderInitializationError, UnauthenticatedError, WeCareDriveError
from wecaredrive.session import FolderIds

logger = logging.getLogger(__name__)


class FolderProvisioner:
    """
    Resolve or create root -> {docs, metadata, settings}.

    The search runs immediately before each create, but two sessions
    provisioning at the same moment can still both create a folder; Drive
    allows duplicate names and nothing here locks across sessions.
    """

    def __init__(self, controller: GoogleDriveController, config: DriveStoreConfig) -> None:
        self._controller = controller
        self._config = config

    def ensure_folder(self, name: str, parent_id: Optional[str] = None) -> str:
        """Return the id of the non-trashed folder `name` under parent (or My Drive root), creating it if absent."""
        matches = self._controller.find(named_folder_query(name, parent_id))
        if matches:
            logger.debug("Found folder %r (%s)", name, matches[0].file_id)
            return matches[0].file_id

        created = self._controller.create_folder(name, parent_id)
        logger.info("Created folder %r (%s) under %s", name, created.file_id, parent_id or "root")
        return created.file_id

    def ensure_folder_structure(self) -> FolderIds:
        """
        Resolve all four folders, memoised on the session.

        Raises:
            FolderInitializationError: if any step fails (nothing is cached then).
        """
        session = self._controller.session
        if session.folders is not None:
            return session.folders

        try:
            if not session.has_token:
                raise UnauthenticatedError()
            root = self.ensure_folder(self._config.root_folder_name)
            docs = self.ensure_folder(self._config.docs_folder_name, root)
            metadata = self.ensure_folder(self._config.metadata_folder_name, root)
            settings = self.ensure_folder(self._config.settings_folder_name, root)
        except WeCareDriveError as exc:
            logger.warning("Folder structure initialization failed: %s", exc)
            raise FolderInitializationError(
                f"Failed to initialize folder structure: {exc}",
                cause=exc,
            ) from exc

        folders = FolderIds(root=root, docs=docs, metadata=metadata, settings=settings)
        session.remember_folders(folders)
        return folders
