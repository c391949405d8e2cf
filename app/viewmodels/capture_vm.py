"""Lightweight view model wrapper around `CaptureRecord`."""

from __future__ import annotations

from dataclasses import dataclass

from app.views.media_utils import is_video
from core.models import CaptureRecord, MediaKind


@dataclass
class CaptureVM:
    """Expose convenient properties for list rows."""

    record: CaptureRecord

    @property
    def file_name(self) -> str:
        return self.record.file_name

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def kind(self) -> MediaKind:
        """Media kind guessed from the file extension."""
        return MediaKind.VIDEO if is_video(self.record.path) else MediaKind.PHOTO

    @property
    def tooltip(self) -> str:
        return self.record.path
