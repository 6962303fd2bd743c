"""Configuration for the Drive-backed document store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from wecaredrive.util.naming import VIEW_URL_TEMPLATE

MiB: int = 1024 * 1024
DEFAULT_MAX_FILE_SIZE: int = 100 * MiB


@dataclass(slots=True, frozen=True)
class DriveStoreConfig:
    """
    Folder layout and limits.

    Layout on Drive:
        <root_folder_name>/
            <docs_folder_name>/       content files
            <metadata_folder_name>/   <fileId>_metadata.json sidecars
            <settings_folder_name>/   <profile_file_name>
    """

    root_folder_name: str = "wecare"
    docs_folder_name: str = "docs"
    metadata_folder_name: str = "metadata"
    settings_folder_name: str = "settings"
    profile_file_name: str = "profile.json"
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    fallback_category: str = "others"
    view_url_template: str = VIEW_URL_TEMPLATE

    def __post_init__(self) -> None:
        for key in (
            "root_folder_name",
            "docs_folder_name",
            "metadata_folder_name",
            "settings_folder_name",
            "profile_file_name",
        ):
            value = getattr(self, key)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"DriveStoreConfig.{key} must be a non-empty string")

        children = {self.docs_folder_name, self.metadata_folder_name, self.settings_folder_name}
        if len(children) != 3:
            raise ValueError("docs, metadata and settings folder names must be distinct")

        if not isinstance(self.max_file_size, int) or self.max_file_size <= 0:
            raise ValueError("DriveStoreConfig.max_file_size must be a positive integer")

        if "{file_id}" not in self.view_url_template:
            raise ValueError("DriveStoreConfig.view_url_template must contain '{file_id}'")

    @property
    def max_file_size_label(self) -> str:
        """Human-readable ceiling, e.g. '100MB'."""
        mb = self.max_file_size / MiB
        return f"{int(mb)}MB" if mb == int(mb) else f"{mb:.1f}MB"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriveStoreConfig":
        """
        Build config from WECARE_* environment variables.

        Recognised: WECARE_ROOT_FOLDER, WECARE_DOCS_FOLDER, WECARE_METADATA_FOLDER,
        WECARE_SETTINGS_FOLDER, WECARE_MAX_FILE_SIZE (bytes), WECARE_FALLBACK_CATEGORY.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str, default: str) -> str:
            value = env.get(name, "").strip()
            return value or default

        raw_size = env.get("WECARE_MAX_FILE_SIZE", "").strip()
        if raw_size:
            try:
                max_size = int(raw_size)
            except ValueError as exc:
                raise ValueError("WECARE_MAX_FILE_SIZE must be an integer byte count") from exc
        else:
            max_size = defaults.max_file_size

        return cls(
            root_folder_name=_get("WECARE_ROOT_FOLDER", defaults.root_folder_name),
            docs_folder_name=_get("WECARE_DOCS_FOLDER", defaults.docs_folder_name),
            metadata_folder_name=_get("WECARE_METADATA_FOLDER", defaults.metadata_folder_name),
            settings_folder_name=_get("WECARE_SETTINGS_FOLDER", defaults.settings_folder_name),
            max_file_size=max_size,
            fallback_category=_get("WECARE_FALLBACK_CATEGORY", defaults.fallback_category),
        )
