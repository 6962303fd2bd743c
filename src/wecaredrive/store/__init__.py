"""Drive-backed document store components."""

from __future__ import annotations

from .deletion import DeletionCoordinator
from .folders import FolderProvisioner
from .listing import ListingEngine
from .metadata import MetadataStore, serialize_record
from .profile import ProfileStore
from .upload import UploadPipeline

__all__ = [
    "FolderProvisioner",
    "MetadataStore",
    "UploadPipeline",
    "ListingEngine",
    "DeletionCoordinator",
    "ProfileStore",
    "serialize_record",
]
