"""ViewModel for capturing and importing photos/videos into the gallery."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from PySide6.QtCore import QObject, Signal
from loguru import logger

from core.models import CaptureRecord, MediaKind
from core.services.gallery_store import GalleryStore
from core.services.interfaces import (
    CapabilityUnavailableError,
    ErrorPresenter,
    FileHandle,
    MediaPicker,
    OperationFailedError,
)

ERROR_TITLE = "Error"


class GalleryVM(QObject):
    """Gallery view-model.

    Owns the ordered list of captured files and the busy flag. Commands are
    coroutines meant to be dispatched one at a time from the UI loop; the busy
    flag turns any command issued while another is in flight into a no-op.
    Every change of `is_busy` or `records` is announced through a signal
    before the mutating call returns.
    """

    busyChanged = Signal(bool)
    recordAdded = Signal(object)  # CaptureRecord
    recordsReset = Signal()

    def __init__(
        self,
        picker: MediaPicker,
        store: GalleryStore,
        presenter: ErrorPresenter,
        parent: QObject | None = None,
    ) -> None:
        """Create a GalleryVM and load the files already in the gallery.

        Args:
            picker: Platform capture/pick capability.
            store: Gallery directory storage.
            presenter: Shows error alerts to the user.
            parent: Optional Qt parent.
        """
        super().__init__(parent)
        self._picker = picker
        self._store = store
        self._presenter = presenter
        self._busy = False
        self._records: list[CaptureRecord] = []
        self.reload()

    @property
    def is_busy(self) -> bool:
        """True while a capture or import is in flight."""
        return self._busy

    @property
    def records(self) -> tuple[CaptureRecord, ...]:
        """Snapshot of the gallery records in insertion order."""
        return tuple(self._records)

    @property
    def gallery_directory(self) -> Path:
        return self._store.directory

    def reload(self) -> None:
        """Rebuild `records` from the gallery directory."""
        self._records.clear()
        self._records.extend(self._store.scan())
        self.recordsReset.emit()

    async def capture_photo(self) -> None:
        await self._capture(MediaKind.PHOTO)

    async def capture_video(self) -> None:
        await self._capture(MediaKind.VIDEO)

    async def add_photo(self) -> None:
        await self._add_to_gallery(MediaKind.PHOTO)

    async def add_video(self) -> None:
        await self._add_to_gallery(MediaKind.VIDEO)

    async def open_photo(self, record: CaptureRecord) -> None:
        """Check the capture capability for `record`.

        No viewer is opened yet; only the capability check runs.
        """
        if not self._picker.is_capture_supported:
            await self._report(CapabilityUnavailableError())
            return
        logger.debug("open_photo requested for {}", record.path)

    async def _capture(self, kind: MediaKind) -> None:
        if kind is MediaKind.VIDEO:
            await self._run(kind, "capture", self._picker.capture_video)
        else:
            await self._run(kind, "capture", self._picker.capture_photo)

    async def _add_to_gallery(self, kind: MediaKind) -> None:
        if kind is MediaKind.VIDEO:
            await self._run(kind, "pick", self._picker.pick_video)
        else:
            await self._run(kind, "pick", self._picker.pick_photo)

    async def _run(
        self,
        kind: MediaKind,
        action: str,
        acquire: Callable[[], Awaitable[FileHandle | None]],
    ) -> None:
        """Acquire a file from the picker and import it into the gallery."""
        if self._busy:
            logger.debug("Ignoring {} {}: another operation is in flight", action, kind.value)
            return

        if not self._picker.is_capture_supported:
            logger.warning("Cannot {} {}: capture not supported", action, kind.value)
            await self._report(CapabilityUnavailableError())
            return

        try:
            self._set_busy(True)
            handle = await acquire()
            if handle is None:
                logger.info("{} {} cancelled by user", action.capitalize(), kind.value)
                return
            record = await self._store.import_file(handle)
            self._append(record)
        except Exception as ex:  # any failure becomes a user-facing alert
            logger.exception("{} {} failed: {}", action.capitalize(), kind.value, ex)
            await self._report(OperationFailedError.from_exception(ex))
        finally:
            self._set_busy(False)

    async def _report(self, error: Exception) -> None:
        await self._presenter.show_error(ERROR_TITLE, str(error))

    def _set_busy(self, value: bool) -> None:
        if self._busy == value:
            return
        self._busy = value
        self.busyChanged.emit(value)

    def _append(self, record: CaptureRecord) -> None:
        self._records.append(record)
        self.recordAdded.emit(record)
