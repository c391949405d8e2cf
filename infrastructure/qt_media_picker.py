"""Desktop media picker built on QtMultimedia and QFileDialog."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from PySide6.QtMultimedia import QMediaDevices
from PySide6.QtWidgets import QFileDialog, QWidget
import aiofiles
from loguru import logger

from app.views.async_tasks import DIALOG_ACCEPTED, await_dialog
from app.views.dialogs.capture_dialog import CaptureDialog
from app.views.media_utils import name_filter
from core.models import MediaKind
from infrastructure.paths import media_library_directory


@dataclass(frozen=True)
class LocalFileHandle:
    """File handle for a file on the local filesystem."""

    full_path: str

    @property
    def file_name(self) -> str:
        return Path(self.full_path).name

    def open_read(self) -> AbstractAsyncContextManager[Any]:
        return aiofiles.open(self.full_path, "rb")


def capture_file_name(kind: MediaKind, now: datetime | None = None) -> str:
    """Name for a new capture, e.g. `IMG_20260101_120000.jpg`."""
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    if kind is MediaKind.VIDEO:
        return f"VID_{ts}.mp4"
    return f"IMG_{ts}.jpg"


class QtMediaPicker:
    """Captures with the default camera and picks from the local disk.

    Each coroutine returns None when the user cancels and raises
    RuntimeError when the camera or recorder reports an error.
    """

    def __init__(self, scratch_dir: Path, parent: QWidget | None = None) -> None:
        self._scratch_dir = Path(scratch_dir)
        self._parent = parent

    def attach(self, parent: QWidget) -> None:
        """Use `parent` as the owner window for capture and pick dialogs."""
        self._parent = parent

    @property
    def is_capture_supported(self) -> bool:
        return bool(QMediaDevices.videoInputs())

    async def capture_photo(self) -> LocalFileHandle | None:
        return await self._capture(MediaKind.PHOTO)

    async def capture_video(self) -> LocalFileHandle | None:
        return await self._capture(MediaKind.VIDEO)

    async def pick_photo(self) -> LocalFileHandle | None:
        return await self._pick(MediaKind.PHOTO)

    async def pick_video(self) -> LocalFileHandle | None:
        return await self._pick(MediaKind.VIDEO)

    async def _capture(self, kind: MediaKind) -> LocalFileHandle | None:
        self._scratch_dir.mkdir(parents=True, exist_ok=True)
        output_path = self._scratch_dir / capture_file_name(kind)
        dialog = CaptureDialog(kind, output_path, self._parent)
        try:
            result = await await_dialog(dialog)
            if dialog.error_message is not None:
                raise RuntimeError(dialog.error_message)
            if result != DIALOG_ACCEPTED or not dialog.captured_path:
                return None
            return LocalFileHandle(full_path=dialog.captured_path)
        finally:
            dialog.deleteLater()

    async def _pick(self, kind: MediaKind) -> LocalFileHandle | None:
        caption = "Add Video" if kind is MediaKind.VIDEO else "Add Photo"
        start_dir = media_library_directory(kind is MediaKind.VIDEO)
        dialog = QFileDialog(self._parent, caption, str(start_dir))
        dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        dialog.setNameFilter(name_filter(kind))
        try:
            result = await await_dialog(dialog)
            files = dialog.selectedFiles()
        finally:
            dialog.deleteLater()
        if result != DIALOG_ACCEPTED or not files:
            return None
        logger.info("Picked {}: {}", kind.value, files[0])
        return LocalFileHandle(full_path=files[0])
