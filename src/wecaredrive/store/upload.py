"""Upload of a content file followed by its sidecar."""

from __future__ import annotations

import logging
from typing import Optional

from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController
from wecaredrive.errors import FileTooLargeError, WeCareDriveError
from wecaredrive.models import FilePayload, FileRecord, UploadOptions, UploadResult
from wecaredrive.util.time import now_rfc3339

from .folders import FolderProvisioner
from .metadata import MetadataStore

logger = logging.getLogger(__name__)


class UploadPipeline:
    """
    Size check -> content upload into docs -> sidecar write.

    Failures come back as UploadResult(success=False). When the content file
    was created but the sidecar write failed, the result still carries the
    file id; listing covers that file with a fallback record.
    """

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

    def check_size(self, payload: FilePayload) -> None:
        if payload.byte_size > self._config.max_file_size:
            raise FileTooLargeError(
                f"File size exceeds limit of {self._config.max_file_size_label}",
                details={"size": payload.byte_size, "limit": self._config.max_file_size},
            )

    def upload(self, payload: FilePayload, options: Optional[UploadOptions] = None) -> UploadResult:
        opts = options or UploadOptions()

        try:
            self.check_size(payload)
        except FileTooLargeError as exc:
            logger.info("Rejected %r (%d bytes): %s", payload.name, payload.byte_size, exc)
            return UploadResult(success=False, error=str(exc))

        display_name = opts.display_name or payload.name
        file_id: Optional[str] = None
        try:
            folders = self._provisioner.ensure_folder_structure()
            info = self._controller.upload(
                payload.content,
                display_name,
                folders.docs,
                mime_type=payload.mime_type,
                description=opts.description,
            )
            file_id = info.file_id

            now = now_rfc3339()
            record = FileRecord(
                file_id=file_id,
                name=display_name,
                mime_type=payload.mime_type,
                size=payload.byte_size,
                created_time=now,
                modified_time=now,
                description=opts.description,
                tags=list(opts.tags or []),
                category=opts.category,
            )
            metadata_id = self._metadata.write(file_id, record)
        except WeCareDriveError as exc:
            if file_id is not None:
                logger.warning("Uploaded %s but writing its metadata failed: %s", file_id, exc)
            else:
                logger.warning("Upload of %r failed: %s", display_name, exc)
            return UploadResult(success=False, file_id=file_id, error=f"Upload failed: {exc}")

        logger.info("Uploaded %r as %s", display_name, file_id)
        return UploadResult(success=True, file_id=file_id, metadata_id=metadata_id)
