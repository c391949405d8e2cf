from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtMultimedia")
pytest.importorskip("PySide6.QtWidgets")

from core.models import MediaKind  # noqa: E402
from infrastructure.qt_media_picker import LocalFileHandle, capture_file_name  # noqa: E402


def test_capture_file_names() -> None:
    now = datetime(2026, 3, 4, 5, 6, 7)

    assert capture_file_name(MediaKind.PHOTO, now) == "IMG_20260304_050607.jpg"
    assert capture_file_name(MediaKind.VIDEO, now) == "VID_20260304_050607.mp4"


def test_local_file_handle_reads_its_file(tmp_path: Path) -> None:
    source = tmp_path / "pick" / "IMG_9.jpg"
    source.parent.mkdir()
    source.write_bytes(b"jpeg-bytes")
    handle = LocalFileHandle(full_path=str(source))

    async def read() -> bytes:
        async with handle.open_read() as stream:
            return await stream.read()

    assert handle.file_name == "IMG_9.jpg"
    assert asyncio.run(read()) == b"jpeg-bytes"
