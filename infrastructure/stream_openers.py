"""Strategies for reading the bytes behind a picked file handle.

On Windows the handle's own stream cannot be relied on, so the file is read
straight from its local path instead. The strategy is picked once, from
settings, when the application is composed.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
import sys
from typing import Any

import aiofiles

from core.services.interfaces import FileHandle

STRATEGY_AUTO = "auto"
STRATEGY_HANDLE = "handle"
STRATEGY_PATH = "path"


class HandleStreamOpener:
    """Reads through the handle's own `open_read`."""

    name = STRATEGY_HANDLE

    def open(self, handle: FileHandle) -> AbstractAsyncContextManager[Any]:
        return handle.open_read()


class PathStreamOpener:
    """Reads the handle's `full_path` directly from the local filesystem."""

    name = STRATEGY_PATH

    def open(self, handle: FileHandle) -> AbstractAsyncContextManager[Any]:
        return aiofiles.open(handle.full_path, "rb")


def select_stream_opener(
    strategy: str = STRATEGY_AUTO, platform: str | None = None
) -> HandleStreamOpener | PathStreamOpener:
    """Return the opener for `strategy`.

    `auto` resolves to `path` on Windows and `handle` everywhere else.
    """
    key = (strategy or STRATEGY_AUTO).strip().lower()
    if key == STRATEGY_AUTO:
        plat = platform if platform is not None else sys.platform
        key = STRATEGY_PATH if plat.startswith("win") else STRATEGY_HANDLE
    if key == STRATEGY_HANDLE:
        return HandleStreamOpener()
    if key == STRATEGY_PATH:
        return PathStreamOpener()
    allowed = ", ".join((STRATEGY_AUTO, STRATEGY_HANDLE, STRATEGY_PATH))
    raise ValueError(f"unknown read strategy '{strategy}' (allowed: {allowed})")
