"""GalleryWindow: buttons bound to gallery commands and a list bound to records."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QSize
from PySide6.QtWidgets import (
    QHBoxLayout,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QStyle,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.capture_vm import CaptureVM
from app.viewmodels.gallery_vm import GalleryVM
from app.views.async_tasks import CommandRunner
from app.views.components.menu_controller import MenuController
from app.views.constants import (
    BUSY_MESSAGE,
    CMD_ADD_PHOTO,
    CMD_ADD_VIDEO,
    CMD_CAPTURE_PHOTO,
    CMD_CAPTURE_VIDEO,
    CMD_OPEN_PHOTO,
    COMMAND_LABELS,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    LIST_ICON_PX,
    RECORD_ROLE,
    WINDOW_TITLE,
)
from core.models import CaptureRecord, MediaKind
from infrastructure.logging import open_latest_log, open_log_directory


class GalleryWindow(QMainWindow):
    """Main window of the gallery.

    The window holds no gallery state of its own: it renders `vm.records`,
    follows `vm.busyChanged`, and hands every user command to the runner.
    """

    def __init__(
        self,
        vm: GalleryVM,
        runner: CommandRunner,
        settings: Any | None = None,
        log_dir: str | None = None,
    ) -> None:
        """Initialize the window and bind it to `vm`.

        Args:
            vm: Gallery view-model
            runner: Dispatches command coroutines on the asyncio loop
            settings: Settings instance for window geometry
            log_dir: Directory used by the Log menu
        """
        super().__init__()
        self._vm = vm
        self._runner = runner
        self._settings = settings
        self._log_dir = log_dir
        self._buttons: dict[str, QPushButton] = {}

        self.menu_controller = MenuController(self)
        self._setup_ui()
        self._connect_signals()
        self._rebuild_list()
        self._apply_busy(vm.is_busy)

    def _setup_ui(self) -> None:
        self.setWindowTitle(WINDOW_TITLE)

        central = QWidget(self)
        root = QVBoxLayout(central)

        buttons = QHBoxLayout()
        for name, label in COMMAND_LABELS.items():
            btn = QPushButton(label)
            buttons.addWidget(btn)
            self._buttons[name] = btn
        buttons.addStretch(1)
        root.addLayout(buttons)

        self.list_widget = QListWidget()
        self.list_widget.setIconSize(QSize(LIST_ICON_PX, LIST_ICON_PX))
        root.addWidget(self.list_widget)
        self.setCentralWidget(central)

        self._progress = QProgressBar()
        self._progress.setRange(0, 0)  # indeterminate
        self._progress.setMaximumWidth(120)
        self._progress.hide()
        self.statusBar().addPermanentWidget(self._progress)

        self.menu_controller.setup_menus()

        width, height = DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT
        if self._settings is not None:
            width = self._settings.get_int("window.width", DEFAULT_WINDOW_WIDTH)
            height = self._settings.get_int("window.height", DEFAULT_WINDOW_HEIGHT)
        self.resize(width, height)

    def _connect_signals(self) -> None:
        commands = {
            CMD_CAPTURE_PHOTO: self._vm.capture_photo,
            CMD_CAPTURE_VIDEO: self._vm.capture_video,
            CMD_ADD_PHOTO: self._vm.add_photo,
            CMD_ADD_VIDEO: self._vm.add_video,
        }
        handlers = {}
        for name, command in commands.items():
            handler = self._make_dispatcher(name, command)
            self._buttons[name].clicked.connect(handler)
            handlers[name] = handler
        handlers["exit"] = self.close
        handlers["open_latest_log"] = lambda: open_latest_log(self._log_dir)
        handlers["open_log_directory"] = lambda: open_log_directory(self._log_dir)
        self.menu_controller.connect_actions(handlers)

        self.list_widget.itemDoubleClicked.connect(self._on_item_double_clicked)

        self._vm.busyChanged.connect(self._apply_busy)
        self._vm.recordAdded.connect(self._append_item)
        self._vm.recordsReset.connect(self._rebuild_list)

    def _make_dispatcher(self, name: str, command):
        def _dispatch(*_args) -> None:
            logger.debug("Dispatching {}", name)
            self._runner.dispatch(name, command)

        return _dispatch

    def _on_item_double_clicked(self, item: QListWidgetItem) -> None:
        record = item.data(RECORD_ROLE)
        if not isinstance(record, CaptureRecord):
            return
        self._runner.dispatch(CMD_OPEN_PHOTO, lambda: self._vm.open_photo(record))

    def _apply_busy(self, busy: bool) -> None:
        for btn in self._buttons.values():
            btn.setEnabled(not busy)
        self.menu_controller.set_commands_enabled(not busy)
        self._progress.setVisible(busy)
        if busy:
            self.statusBar().showMessage(BUSY_MESSAGE)
        else:
            self._show_count()

    def _icon_for(self, row: CaptureVM):
        pixmap = (
            QStyle.StandardPixmap.SP_MediaPlay
            if row.kind is MediaKind.VIDEO
            else QStyle.StandardPixmap.SP_FileIcon
        )
        return self.style().standardIcon(pixmap)

    def _make_item(self, record: CaptureRecord) -> QListWidgetItem:
        row = CaptureVM(record)
        item = QListWidgetItem(self._icon_for(row), row.file_name)
        item.setToolTip(row.tooltip)
        item.setData(RECORD_ROLE, record)
        return item

    def _append_item(self, record: CaptureRecord) -> None:
        self.list_widget.addItem(self._make_item(record))
        self.list_widget.scrollToBottom()
        if not self._vm.is_busy:
            self._show_count()

    def _rebuild_list(self) -> None:
        self.list_widget.clear()
        for record in self._vm.records:
            self.list_widget.addItem(self._make_item(record))
        self._show_count()

    def _show_count(self) -> None:
        count = self.list_widget.count()
        self.statusBar().showMessage(f"{count} item(s) in {self._vm.gallery_directory}")
