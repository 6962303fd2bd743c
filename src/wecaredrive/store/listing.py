"""Listing of content files reconciled with their sidecars."""

from __future__ import annotations

import dataclasses
import logging

from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController
from wecaredrive.controller.fields import children_query
from wecaredrive.errors import SessionExpiredError, UnauthenticatedError, WeCareDriveError
from wecaredrive.models import DriveFile, FileRecord, SidecarFound, SidecarLookup, SidecarMissing
from wecaredrive.util.naming import view_url

from .folders import FolderProvisioner
from .metadata import MetadataStore

logger = logging.getLogger(__name__)


class ListingEngine:
    """Produce one FileRecord per content file in docs, in Drive's order."""

    def __init__(
        self,
        controller: GoogleDriveController,
        provisioner: FolderProvisioner,
        metadata: MetadataStore,
        config: DriveStoreConfig,
    ) -> None:
        self._controller = controller
        self._provisioner = provisioner
        self._metadata = metadata
        self._config = config

    def list(self) -> list[FileRecord]:
        """
        Raises:
            UnauthenticatedError: no token held.
            SessionExpiredError: the token failed validation.
            FolderInitializationError: provisioning failed.
            RemoteApiError: Drive could not be reached to validate the token, or
                enumerating the docs folder failed.
        """
        if not self._controller.session.has_token:
            raise UnauthenticatedError()
        if not self._controller.validate_token():
            raise SessionExpiredError()

        folders = self._provisioner.ensure_folder_structure()
        files = self._controller.list_children(children_query(folders.docs))
        logger.debug("Found %d content files", len(files))
        return [self.reconcile(f) for f in files]

    def reconcile(self, native: DriveFile) -> FileRecord:
        """Sidecar record with fileUrl overlaid, or a fallback built from native attributes."""
        url = view_url(native.file_id, native.web_view_link, template=self._config.view_url_template)

        found = self._lookup(native)
        if isinstance(found, SidecarFound):
            return dataclasses.replace(found.record, file_url=url)

        logger.debug("No metadata for %r (%s); using fallback", native.name, native.file_id)
        return self.fallback_record(native, url)

    def fallback_record(self, native: DriveFile, url: str) -> FileRecord:
        return FileRecord(
            file_id=native.file_id,
            name=native.name,
            mime_type=native.mime_type,
            size=native.size,
            created_time=native.created_time or "",
            modified_time=native.modified_time or "",
            description="",
            tags=[],
            category=self._config.fallback_category,
            file_url=url,
        )

    def _lookup(self, native: DriveFile) -> SidecarLookup:
        try:
            return self._metadata.lookup(native.file_id)
        except WeCareDriveError as exc:
            logger.warning("Metadata for %r (%s) could not be read: %s", native.name, native.file_id, exc)
            return SidecarMissing()
