from __future__ import annotations

from pathlib import Path
import sys

from PySide6 import QtAsyncio
from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.gallery_vm import GalleryVM
from app.views.async_tasks import CommandRunner
from app.views.gallery_window import GalleryWindow
from app.views.handlers.alert_handler import QtErrorPresenter
from core.services.gallery_store import DEFAULT_CHUNK_SIZE, GalleryStore
from infrastructure.logging import init_logging
from infrastructure.paths import (
    APPLICATION_NAME,
    ORGANIZATION_NAME,
    capture_scratch_directory,
    resolve_gallery_directory,
)
from infrastructure.qt_media_picker import QtMediaPicker
from infrastructure.settings import JsonSettings
from infrastructure.stream_openers import select_stream_opener

BASE_DIR = Path(__file__).parent


def main() -> int:
    app = QApplication(sys.argv)
    # QStandardPaths derives the app data location from these names
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)

    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = init_logging(settings.get("logging.directory"), settings.get("logging.level", "INFO"))

    opener = select_stream_opener(settings.get("storage.read_strategy", "auto"))
    store = GalleryStore(
        resolve_gallery_directory(settings),
        opener,
        chunk_size=settings.get_int("storage.chunk_size", DEFAULT_CHUNK_SIZE),
    )
    logger.info("Gallery directory: {} (read strategy: {})", store.directory, opener.name)

    picker = QtMediaPicker(capture_scratch_directory())
    presenter = QtErrorPresenter()
    vm = GalleryVM(picker, store, presenter)

    win = GalleryWindow(vm, CommandRunner(), settings=settings, log_dir=log_dir)
    picker.attach(win)
    presenter.attach(win)
    win.show()

    QtAsyncio.run(handle_sigint=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
