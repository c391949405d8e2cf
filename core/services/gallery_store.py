"""Filesystem-backed gallery storage.

The gallery directory holds one file per capture. Its listing at startup is
the persisted index; there are no sidecars and no manifest.
"""

from __future__ import annotations

import os
from pathlib import Path
import uuid

import aiofiles
from loguru import logger

from core.models import CaptureRecord
from core.services.interfaces import FileHandle, StreamOpener

DEFAULT_CHUNK_SIZE = 64 * 1024


class GalleryStore:
    """Scans the gallery directory and copies picked files into it."""

    def __init__(
        self,
        directory: str | Path,
        opener: StreamOpener,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Create a store rooted at `directory`.

        Args:
            directory: Gallery directory; created with parents when missing.
            opener: Strategy used to read picked file handles.
            chunk_size: Copy buffer size in bytes.
        """
        if chunk_size < 1:
            raise ValueError("chunk_size must be >= 1")
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self._opener = opener
        self._chunk_size = int(chunk_size)

    def scan(self) -> list[CaptureRecord]:
        """Return one record per regular file, in enumeration order."""
        records: list[CaptureRecord] = []
        with os.scandir(self.directory) as entries:
            for entry in entries:
                if not entry.is_file():
                    continue
                records.append(CaptureRecord(file_name=entry.name, path=entry.path))
        logger.info("Gallery scan: {} file(s) in {}", len(records), self.directory)
        return records

    def destination_for(self, file_name: str) -> Path:
        """Gallery path for `file_name`, reduced to its base name."""
        base = Path(file_name.replace("\\", "/")).name
        if not base or base in (".", ".."):
            raise ValueError(f"invalid file name: {file_name!r}")
        return self.directory / base

    async def import_file(self, handle: FileHandle) -> CaptureRecord:
        """Copy the bytes behind `handle` into the gallery.

        Data is written to a temporary sibling first and moved into place once
        the copy completes, so a failed copy leaves no gallery entry behind.
        """
        dest = self.destination_for(handle.file_name)
        temp_path = dest.with_name(f".{dest.name}.{uuid.uuid4().hex}.tmp")
        copied = 0
        try:
            async with aiofiles.open(temp_path, "wb") as dst:
                async with self._opener.open(handle) as src:
                    while True:
                        chunk = await src.read(self._chunk_size)
                        if not chunk:
                            break
                        await dst.write(chunk)
                        copied += len(chunk)
            os.replace(temp_path, dest)
        finally:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
        logger.info("Imported {} ({} bytes) -> {}", handle.full_path, copied, dest)
        return CaptureRecord(file_name=dest.name, path=str(dest))
