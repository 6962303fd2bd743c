"""Tagged result of a sidecar lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .file_record import FileRecord


@dataclass(slots=True, frozen=True)
class SidecarFound:
    record: FileRecord
    sidecar_id: str


@dataclass(slots=True, frozen=True)
class SidecarMissing:
    pass


SidecarLookup = Union[SidecarFound, SidecarMissing]
