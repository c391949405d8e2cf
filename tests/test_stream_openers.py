from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from conftest import FakeFileHandle
from infrastructure.stream_openers import (
    HandleStreamOpener,
    PathStreamOpener,
    select_stream_opener,
)


@pytest.mark.parametrize(
    ("strategy", "platform", "expected"),
    [
        ("auto", "win32", PathStreamOpener),
        ("auto", "linux", HandleStreamOpener),
        ("auto", "darwin", HandleStreamOpener),
        ("", "win32", PathStreamOpener),
        ("handle", "win32", HandleStreamOpener),
        ("PATH", "linux", PathStreamOpener),
    ],
)
def test_select_stream_opener(strategy: str, platform: str, expected: type) -> None:
    assert isinstance(select_stream_opener(strategy, platform), expected)


def test_select_stream_opener_rejects_unknown_strategy() -> None:
    with pytest.raises(ValueError, match="unknown read strategy 'mmap'"):
        select_stream_opener("mmap", "linux")


def _read_all(opener, handle) -> bytes:
    async def run() -> bytes:
        async with opener.open(handle) as stream:
            return await stream.read()

    return asyncio.run(run())


def test_handle_opener_uses_handle_stream() -> None:
    handle = FakeFileHandle("a.jpg", b"from-handle", full_path="/does/not/exist.jpg")

    assert _read_all(HandleStreamOpener(), handle) == b"from-handle"


def test_path_opener_reads_full_path(tmp_path: Path) -> None:
    source = tmp_path / "a.jpg"
    source.write_bytes(b"from-disk")
    handle = FakeFileHandle("a.jpg", b"ignored", full_path=str(source))

    assert _read_all(PathStreamOpener(), handle) == b"from-disk"
