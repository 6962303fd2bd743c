"""WeCareDriveService: the facade screens and other callers talk to."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from wecaredrive.auth import DEFAULT_SCOPES, AuthInfo, OAuthClient, TokenPair
from wecaredrive.config import DriveStoreConfig
from wecaredrive.controller import GoogleDriveController, RequestExecutor
from wecaredrive.errors import AuthError, RemoteApiError, WeCareDriveError
from wecaredrive.models import (
    DocumentView,
    FilePayload,
    FileRecord,
    FolderStatus,
    MetadataUpdate,
    UploadOptions,
    UploadResult,
    document_view,
)
from wecaredrive.session import DriveSession, FolderIds
from wecaredrive.store import (
    DeletionCoordinator,
    FolderProvisioner,
    ListingEngine,
    MetadataStore,
    ProfileStore,
    UploadPipeline,
)

logger = logging.getLogger(__name__)


class WeCareDriveService:
    """
    Document store on Google Drive for one signed-in user.

    Files live in wecare/docs, one `<fileId>_metadata.json` sidecar per file
    lives in wecare/metadata, and the user profile in wecare/settings.
    """

    def __init__(
        self,
        auth_info: Optional[AuthInfo] = None,
        *,
        config: Optional[DriveStoreConfig] = None,
        session: Optional[DriveSession] = None,
    ) -> None:
        use_session = session or DriveSession()
        controller = GoogleDriveController(RequestExecutor(use_session))
        oauth = OAuthClient(auth_info) if auth_info is not None else None
        self._wire(controller, config or DriveStoreConfig(), oauth)

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        *,
        config: Optional[DriveStoreConfig] = None,
        oauth_client: Optional[OAuthClient] = None,
    ) -> "WeCareDriveService":
        """Create service with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._wire(controller, config or DriveStoreConfig(), oauth_client)
        return obj

    def _wire(
        self,
        controller: GoogleDriveController,
        config: DriveStoreConfig,
        oauth: Optional[OAuthClient],
    ) -> None:
        self._controller = controller
        self._config = config
        self._oauth = oauth
        self._folders = FolderProvisioner(controller, config)
        self._metadata = MetadataStore(controller, self._folders, config)
        self._uploads = UploadPipeline(controller, self._folders, self._metadata, config)
        self._listing = ListingEngine(controller, self._folders, self._metadata, config)
        self._deletion = DeletionCoordinator(controller, self._metadata)
        self._profile = ProfileStore(controller, self._folders, config)

    @property
    def session(self) -> DriveSession:
        return self._controller.session

    @property
    def config(self) -> DriveStoreConfig:
        return self._config

    # ----------------------------
    # Session
    # ----------------------------
    def set_access_token(self, token: str) -> None:
        self.session.set_token(token)

    def clear_access_token(self) -> None:
        self.session.clear()

    def get_folder_status(self) -> FolderStatus:
        return self.session.status()

    def validate_token(self) -> bool:
        return self._controller.validate_token()

    def refresh_access_token(self, refresh_token: str) -> Optional[str]:
        """New access token for refresh_token, or None if it was rejected. The session is not changed."""
        return self._require_oauth().refresh_access_token(refresh_token)

    def sign_in(self, scopes: Sequence[str] = DEFAULT_SCOPES) -> TokenPair:
        """Run the installed-app OAuth flow and start a session with its token."""
        tokens = self._require_oauth().login(scopes)
        self.set_access_token(tokens.access_token)
        self._initialize_quietly()
        return tokens

    def restore_session(self, access_token: str, refresh_token: Optional[str] = None) -> bool:
        """
        Resume a stored login.

        Validates access_token and, if it is rejected, tries one refresh.
        Returns False (with the session cleared) when neither works. Folder
        provisioning is attempted but its failure does not fail the restore.
        A validation call that cannot reach Drive also ends the session.
        """
        self.set_access_token(access_token)
        try:
            valid = self.validate_token()
        except RemoteApiError as exc:
            logger.warning("Could not validate stored token: %s", exc)
            self.clear_access_token()
            return False

        if not valid:
            new_token = None
            if refresh_token and self._oauth is not None:
                try:
                    new_token = self._oauth.refresh_access_token(refresh_token)
                except AuthError as exc:
                    logger.warning("Token refresh failed: %s", exc)
            if not new_token:
                self.clear_access_token()
                return False
            self.set_access_token(new_token)

        self._initialize_quietly()
        return True

    # ----------------------------
    # Documents
    # ----------------------------
    def initialize_folder_structure(self) -> FolderIds:
        return self._folders.ensure_folder_structure()

    def upload_file(
        self,
        payload: FilePayload,
        *,
        display_name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        category: Optional[str] = None,
    ) -> UploadResult:
        options = UploadOptions(
            display_name=display_name,
            description=description,
            tags=list(tags) if tags is not None else None,
            category=category,
        )
        return self._uploads.upload(payload, options)

    def list_files(self) -> list[FileRecord]:
        return self._listing.list()

    def list_documents(self) -> list[DocumentView]:
        return [
            document_view(r, fallback_category=self._config.fallback_category)
            for r in self._listing.list()
        ]

    def get_file_metadata(self, file_id: str) -> Optional[FileRecord]:
        return self._metadata.read(file_id)

    def update_metadata(
        self,
        file_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
        category: Optional[str] = None,
    ) -> FileRecord:
        changes = MetadataUpdate(
            name=name,
            description=description,
            tags=list(tags) if tags is not None else None,
            category=category,
        )
        return self._metadata.update(file_id, changes)

    def update_file_name(self, file_id: str, new_name: str) -> bool:
        """Rename the content file only (the sidecar is left as is)."""
        self._controller.rename(file_id, new_name)
        return True

    def delete_file(self, file_id: str) -> bool:
        return self._deletion.delete(file_id)

    # ----------------------------
    # Profile
    # ----------------------------
    def save_profile(self, profile: Mapping[str, Any]) -> bool:
        return self._profile.save(profile)

    def get_profile(self) -> Optional[dict[str, Any]]:
        return self._profile.load()

    # ----------------------------
    # Internals
    # ----------------------------
    def _require_oauth(self) -> OAuthClient:
        if self._oauth is None:
            raise AuthError("OAuth client is not configured; pass AuthInfo to WeCareDriveService")
        return self._oauth

    def _initialize_quietly(self) -> None:
        try:
            self._folders.ensure_folder_structure()
        except WeCareDriveError as exc:
            logger.warning("Folder initialization after sign-in failed: %s", exc)
