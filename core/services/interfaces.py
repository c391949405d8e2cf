"""Core service interfaces and workflow errors.

This module defines the seams between the gallery workflow and its
collaborators: the platform media picker, the file handles it returns, the
strategy used to read those handles, and the UI that shows error alerts.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

CAMERA_NOT_AVAILABLE = "Camera not available"


class CapabilityUnavailableError(RuntimeError):
    """Capture or pick is not supported on this device."""

    def __init__(self, message: str = CAMERA_NOT_AVAILABLE) -> None:
        super().__init__(message)


class OperationFailedError(RuntimeError):
    """A capture, pick or copy failed.

    The message is the one shown to the user.
    """

    @classmethod
    def from_exception(cls, ex: BaseException) -> OperationFailedError:
        """Wrap `ex`, keeping its message (or its class name when empty)."""
        message = str(ex) or type(ex).__name__
        err = cls(message)
        err.__cause__ = ex
        return err


class ReadableStream(Protocol):
    """Async byte source yielded by `FileHandle.open_read`."""

    async def read(self, size: int = -1) -> bytes:
        """Read up to `size` bytes; empty bytes at end of stream."""
        ...


class FileHandle(Protocol):
    """File produced by the media picker."""

    @property
    def file_name(self) -> str:
        """Base name proposed for the file."""
        ...

    @property
    def full_path(self) -> str:
        """Absolute local path of the file."""
        ...

    def open_read(self) -> AbstractAsyncContextManager[Any]:
        """Open the handle's own byte stream."""
        ...


class MediaPicker(Protocol):
    """Platform capability that captures or picks photos and videos.

    Every coroutine returns None when the user cancels.
    """

    @property
    def is_capture_supported(self) -> bool: ...

    async def capture_photo(self) -> FileHandle | None: ...

    async def capture_video(self) -> FileHandle | None: ...

    async def pick_photo(self) -> FileHandle | None: ...

    async def pick_video(self) -> FileHandle | None: ...


class StreamOpener(Protocol):
    """Strategy that opens a readable stream for a file handle."""

    def open(self, handle: FileHandle) -> AbstractAsyncContextManager[Any]: ...


class ErrorPresenter(Protocol):
    """Shows a blocking alert with a title, a message and one dismiss action."""

    async def show_error(self, title: str, message: str) -> None: ...
