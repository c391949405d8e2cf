"""MenuController: Manages menu creation and action connections."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QMenuBar

from app.views.constants import COMMAND_LABELS


class MenuController:
    """Manages main window menu creation and action connections."""

    def __init__(self, main_window: QMainWindow) -> None:
        self.window = main_window
        self.actions: dict[str, QAction] = {}

    def setup_menus(self) -> dict[str, QAction]:
        """Create all menus and return action references.

        Returns:
            Dictionary mapping action names to QAction instances
        """
        menubar = QMenuBar(self.window)

        # Gallery Menu
        gallery_menu = menubar.addMenu("Gallery")
        for name, label in COMMAND_LABELS.items():
            self.actions[name] = gallery_menu.addAction(label)
        gallery_menu.addSeparator()
        self.actions["exit"] = gallery_menu.addAction("Exit")

        # Log Menu
        log_menu = menubar.addMenu("Log")
        self.actions["open_latest_log"] = log_menu.addAction("Open Latest Log")
        self.actions["open_log_directory"] = log_menu.addAction("Open Log Directory")

        self.window.setMenuBar(menubar)
        return self.actions

    def connect_actions(self, handlers: dict[str, Callable]) -> None:
        """Connect menu actions to their handler methods.

        Args:
            handlers: Dictionary mapping action names to handler callables
        """
        for name, handler in handlers.items():
            action = self.actions.get(name)
            if action is not None:
                action.triggered.connect(handler)

    def set_commands_enabled(self, enabled: bool) -> None:
        """Enable or disable the gallery command actions."""
        for name in COMMAND_LABELS:
            action = self.actions.get(name)
            if action is not None:
                action.setEnabled(enabled)
