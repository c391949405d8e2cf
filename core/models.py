"""Core domain models for gallery captures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MediaKind(Enum):
    """Kind of media a capture or pick operation produces."""

    PHOTO = "photo"
    VIDEO = "video"


@dataclass(frozen=True)
class CaptureRecord:
    """A file stored in the gallery directory.

    Records never change after creation; `path` is their only identity.
    """

    file_name: str
    path: str
