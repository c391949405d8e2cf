"""AlertHandler: presents workflow errors as modal message boxes."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMessageBox, QWidget
from loguru import logger

from app.views.async_tasks import await_dialog


class QtErrorPresenter:
    """Shows an error alert with a title, a message and a single OK button.

    `show_error` resolves once the user dismisses the alert.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def attach(self, parent: QWidget) -> None:
        """Use `parent` as the owner window for subsequent alerts."""
        self._parent = parent

    async def show_error(self, title: str, message: str) -> None:
        logger.info("Alert shown: {} - {}", title, message)
        box = QMessageBox(
            QMessageBox.Icon.Critical,
            title,
            message,
            QMessageBox.StandardButton.Ok,
            self._parent,
        )
        box.setWindowModality(Qt.WindowModality.WindowModal)
        try:
            await await_dialog(box)
        finally:
            box.deleteLater()
