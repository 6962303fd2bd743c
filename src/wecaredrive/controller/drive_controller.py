"""Google Drive file operations used by the document store (internal use only)."""

from __future__ import annotations

import io
import logging
from typing import Any, Optional

from googleapiclient.http import MediaIoBaseUpload

from wecaredrive.errors import UploadResponseMalformedError
from wecaredrive.models import DriveFile, drive_file_from_dict
from wecaredrive.session import DriveSession
from wecaredrive.util.mime import FOLDER_MIME

from .executor import RequestExecutor
from .fields import FILE_FIELDS, LIST_FIELDS, SEARCH_FIELDS

logger = logging.getLogger(__name__)


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - Every call goes through the RequestExecutor, so every call needs a token.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    @classmethod
    def from_service(cls, session: DriveSession, service: Any) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        return cls(RequestExecutor.from_service(session, service))

    @property
    def session(self) -> DriveSession:
        return self._executor.session

    # ----------------------------
    # Public API
    # ----------------------------
    def find(
        self,
        query: str,
        *,
        fields: str = SEARCH_FIELDS,
        order_by: Optional[str] = None,
    ) -> list[DriveFile]:
        """Run a files.list query and follow nextPageToken until exhausted."""
        extra: dict[str, Any] = {"orderBy": order_by} if order_by else {}
        all_files: list[DriveFile] = []
        page_token: Optional[str] = None

        while True:
            req = self._files().list(q=query, fields=fields, pageToken=page_token, **extra)
            data = self._executor.execute(req)
            for f in data.get("files", []) or []:
                if isinstance(f, dict):
                    all_files.append(drive_file_from_dict(f))

            page_token = data.get("nextPageToken")
            if not page_token:
                break

        return all_files

    def list_children(self, query: str) -> list[DriveFile]:
        """Like find() but projecting the native attributes needed for listing."""
        return self.find(query, fields=LIST_FIELDS)

    def create_folder(self, name: str, parent_id: Optional[str] = None) -> DriveFile:
        body: dict[str, Any] = {"name": name, "mimeType": FOLDER_MIME}
        if parent_id:
            body["parents"] = [parent_id]
        req = self._files().create(body=body, fields="id,name")
        data = self._executor.execute(req)
        info = drive_file_from_dict(data)
        if not info.file_id:
            raise UploadResponseMalformedError(
                "Folder creation response missing file ID",
                details={"name": name},
            )
        return info

    def upload(
        self,
        content: bytes,
        name: str,
        parent_id: str,
        *,
        mime_type: str,
        description: Optional[str] = None,
    ) -> DriveFile:
        """
        Multipart upload (metadata part + media part) into parent_id.

        Raises:
            UploadResponseMalformedError: if Drive returns no file id.
        """
        body: dict[str, Any] = {"name": name, "parents": [parent_id], "mimeType": mime_type}
        if description:
            body["description"] = description

        media = MediaIoBaseUpload(io.BytesIO(bytes(content)), mimetype=mime_type, resumable=False)
        req = self._files().create(body=body, media_body=media, fields=FILE_FIELDS)
        data = self._executor.execute(req)

        info = drive_file_from_dict(data) if isinstance(data, dict) else None
        if info is None or not info.file_id:
            raise UploadResponseMalformedError(
                "Upload response missing file ID",
                details={"name": name, "parent_id": parent_id},
            )
        logger.debug("Uploaded %r into %s as %s", name, parent_id, info.file_id)
        return info

    def rename(self, file_id: str, new_name: str) -> Any:
        req = self._files().update(fileId=file_id, body={"name": new_name})
        return self._executor.execute(req)

    def delete(self, file_id: str) -> None:
        req = self._files().delete(fileId=file_id)
        self._executor.execute(req)

    def read_content(self, file_id: str) -> Any:
        """Download a file body (alt=media); JSON bodies come back parsed."""
        req = self._files().get_media(fileId=file_id)
        return self._executor.execute(req)

    def validate_token(self) -> bool:
        return self._executor.validate()

    # ----------------------------
    # Internals
    # ----------------------------
    def _files(self) -> Any:
        return self._executor.service.files()
