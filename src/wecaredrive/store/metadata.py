"""Sidecar metadata records stored in the metadata folder."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Optional

from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController
from wecaredrive.controller.fields import named_child_query
from wecaredrive.errors import (
    InvalidArgumentError,
    MetadataNotFoundError,
    MetadataUnreadableError,
    RemoteApiError,
)
from wecaredrive.models import (
    DriveFile,
    FileRecord,
    MetadataUpdate,
    SidecarFound,
    SidecarLookup,
    SidecarMissing,
)
from wecaredrive.util.mime import JSON_MIME
from wecaredrive.util.naming import sidecar_name
from wecaredrive.util.time import rfc3339_after

from .folders import FolderProvisioner

logger = logging.getLogger(__name__)


def serialize_record(record: FileRecord) -> bytes:
    return json.dumps(record.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


class MetadataStore:
    """Read, write, update and delete `<fileId>_metadata.json` sidecars."""

    def __init__(
        self,
        controller: GoogleDriveController,
        provisioner: FolderProvisioner,
        config: DriveStoreConfig,
    ) -> None:
        self._controller = controller
        self._provisioner = provisioner
        self._config = config

    def write(self, file_id: str, record: FileRecord) -> str:
        """Upload the record as a new sidecar. Returns the sidecar's Drive id."""
        folders = self._provisioner.ensure_folder_structure()
        info = self._controller.upload(
            serialize_record(record),
            sidecar_name(file_id),
            folders.metadata,
            mime_type=JSON_MIME,
        )
        return info.file_id

    def lookup(self, file_id: str) -> SidecarLookup:
        """
        Find and parse the sidecar for file_id.

        Raises:
            MetadataUnreadableError: if the sidecar body is not a record for file_id.
            RemoteApiError: on Drive failures.
        """
        hit = self._find(file_id)
        if hit is None:
            return SidecarMissing()

        data = self._controller.read_content(hit.file_id)
        try:
            record = FileRecord.from_dict(data)
        except ValueError as exc:
            raise MetadataUnreadableError(
                f"Metadata for {file_id} is unreadable: {exc}",
                details={"file_id": file_id, "sidecar_id": hit.file_id},
                cause=exc,
            ) from exc

        if record.file_id != file_id:
            raise MetadataUnreadableError(
                f"Metadata for {file_id} names a different file",
                details={"file_id": file_id, "sidecar_file_id": record.file_id},
            )
        return SidecarFound(record=record, sidecar_id=hit.file_id)

    def read(self, file_id: str) -> Optional[FileRecord]:
        """The stored record, or None when no sidecar exists."""
        found = self.lookup(file_id)
        if isinstance(found, SidecarFound):
            return found.record
        return None

    def update(self, file_id: str, changes: MetadataUpdate) -> FileRecord:
        """
        Merge `changes` over the stored record and rewrite the sidecar.

        A changed name is also applied to the content file, best effort. The
        old sidecar is deleted before the new one is written, so a failure in
        between leaves the file without a sidecar until the next update.
        An empty update returns the stored record without rewriting anything.

        Raises:
            MetadataNotFoundError: if the file has no sidecar.
        """
        if changes.name is not None and not changes.name.strip():
            raise InvalidArgumentError("name must be a non-empty string")

        found = self.lookup(file_id)
        if isinstance(found, SidecarMissing):
            raise MetadataNotFoundError(
                "File metadata not found",
                details={"file_id": file_id},
            )
        existing = found.record
        if changes.is_empty():
            logger.debug("Empty metadata update for %s; nothing rewritten", file_id)
            return existing

        if changes.name is not None and changes.name != existing.name:
            try:
                self._controller.rename(file_id, changes.name)
            except RemoteApiError as exc:
                logger.warning("Could not rename content file %s to %r: %s", file_id, changes.name, exc)

        merged = dataclasses.replace(
            existing,
            name=changes.name if changes.name is not None else existing.name,
            description=changes.description if changes.description is not None else existing.description,
            tags=list(changes.tags) if changes.tags is not None else list(existing.tags),
            category=changes.category if changes.category is not None else existing.category,
            modified_time=rfc3339_after(existing.modified_time),
            file_url=None,
        )

        self._controller.delete(found.sidecar_id)
        self.write(file_id, merged)
        return merged

    def delete(self, file_id: str) -> bool:
        """Delete the sidecar for file_id. Returns False when there was none."""
        hit = self._find(file_id)
        if hit is None:
            return False
        self._controller.delete(hit.file_id)
        return True

    def _find(self, file_id: str) -> Optional[DriveFile]:
        folders = self._provisioner.ensure_folder_structure()
        matches = self._controller.find(named_child_query(sidecar_name(file_id), folders.metadata))
        if len(matches) > 1:
            logger.warning("Found %d sidecars for %s; using the first", len(matches), file_id)
        return matches[0] if matches else None
