from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
from functools import partial
from typing import Any

from PySide6.QtWidgets import QDialog
from loguru import logger

DIALOG_ACCEPTED: int = QDialog.DialogCode.Accepted.value


async def await_dialog(dialog: QDialog) -> int:
    """Open `dialog` window-modally and wait for it to finish.

    Returns the dialog result code. The Qt event loop keeps running while
    waiting, so other coroutines and repaints proceed.
    """
    future: asyncio.Future[int] = asyncio.get_running_loop().create_future()

    def _on_finished(result: int) -> None:
        if not future.done():
            future.set_result(int(result))

    dialog.finished.connect(_on_finished)
    dialog.open()
    return await future


class CommandRunner:
    """Dispatches view-model command coroutines onto the running asyncio loop.

    Tasks are kept referenced until they finish. Anything a command lets
    escape is logged here rather than printed by the loop.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Future[Any]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch(
        self, name: str, command: Callable[[], Coroutine[Any, Any, Any]]
    ) -> asyncio.Future[Any]:
        """Start `command()` as a task named `name` and return it."""
        task = asyncio.ensure_future(command())
        self._tasks.add(task)
        task.add_done_callback(partial(self._on_done, name))
        return task

    def _on_done(self, name: str, task: asyncio.Future[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.info("Command {} cancelled", name)
            return
        ex = task.exception()
        if ex is not None:
            logger.opt(exception=ex).error("Command {} failed: {}", name, ex)
