"""Per-login session state: the access token and cached folder ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wecaredrive.models import FolderStatus


@dataclass(slots=True, frozen=True)
class FolderIds:
    root: str
    docs: str
    metadata: str
    settings: str


class DriveSession:
    """
    Credential holder for one login.

    Created on login and cleared on logout. Clearing drops the cached folder
    ids too, so the next authenticated use provisions again.
    """

    def __init__(self, access_token: Optional[str] = None) -> None:
        self._access_token: Optional[str] = access_token or None
        self._folders: Optional[FolderIds] = None
        self._generation = 0

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def has_token(self) -> bool:
        return bool(self._access_token)

    @property
    def generation(self) -> int:
        """Incremented on every token change; lets the executor rebuild its service."""
        return self._generation

    @property
    def folders(self) -> Optional[FolderIds]:
        return self._folders

    def set_token(self, token: str) -> None:
        self._access_token = token or None
        self._generation += 1

    def clear(self) -> None:
        self._access_token = None
        self._folders = None
        self._generation += 1

    def remember_folders(self, folders: FolderIds) -> None:
        self._folders = folders

    def status(self) -> FolderStatus:
        f = self._folders
        return FolderStatus(
            has_access_token=self.has_token,
            root_folder_id=f.root if f else None,
            docs_folder_id=f.docs if f else None,
            metadata_folder_id=f.metadata if f else None,
            settings_folder_id=f.settings if f else None,
        )
