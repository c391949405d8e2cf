from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
import io
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from core.services.gallery_store import GalleryStore
from infrastructure.stream_openers import HandleStreamOpener


@pytest.fixture(scope="session", autouse=True)
def qt_core_app() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


class _AsyncBytesReader:
    def __init__(self, data: bytes) -> None:
        self._buf = io.BytesIO(data)

    async def read(self, size: int = -1) -> bytes:
        return self._buf.read(size)


@dataclass
class FakeFileHandle:
    """In-memory file handle; `open_read` serves `data`."""

    file_name: str
    data: bytes = b""
    full_path: str = ""
    open_error: Exception | None = None

    @asynccontextmanager
    async def _open(self):
        if self.open_error is not None:
            raise self.open_error
        yield _AsyncBytesReader(self.data)

    def open_read(self):
        return self._open()


@dataclass
class FakeMediaPicker:
    """Scripted media picker.

    `results` maps a method name to the handle it returns (None means the
    user cancelled) or to an exception it raises. When `gate` is set, every
    call waits on it before answering.
    """

    supported: bool = True
    results: dict[str, object] = field(default_factory=dict)
    gate: asyncio.Event | None = None
    calls: list[str] = field(default_factory=list)

    @property
    def is_capture_supported(self) -> bool:
        return self.supported

    async def _answer(self, name: str):
        self.calls.append(name)
        if self.gate is not None:
            await self.gate.wait()
        result = self.results.get(name)
        if isinstance(result, Exception):
            raise result
        return result

    async def capture_photo(self):
        return await self._answer("capture_photo")

    async def capture_video(self):
        return await self._answer("capture_video")

    async def pick_photo(self):
        return await self._answer("pick_photo")

    async def pick_video(self):
        return await self._answer("pick_video")


@dataclass
class RecordingPresenter:
    alerts: list[tuple[str, str]] = field(default_factory=list)

    async def show_error(self, title: str, message: str) -> None:
        self.alerts.append((title, message))


@pytest.fixture
def gallery_dir(tmp_path: Path) -> Path:
    path = tmp_path / "gallery"
    path.mkdir()
    return path


@pytest.fixture
def store(gallery_dir: Path) -> GalleryStore:
    return GalleryStore(gallery_dir, HandleStreamOpener())


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()
