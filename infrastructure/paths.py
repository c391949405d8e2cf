"""Application directory locations backed by `QStandardPaths`."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QStandardPaths

ORGANIZATION_NAME = "GalleryCamera"
APPLICATION_NAME = "GalleryCamera"


def _writable(location: QStandardPaths.StandardLocation) -> Path:
    raw = QStandardPaths.writableLocation(location)
    if not raw:
        # QStandardPaths can return "" on minimal platforms.
        return Path.home() / f".{APPLICATION_NAME.lower()}"
    return Path(raw)


def app_data_directory() -> Path:
    """App-private data directory; default home of the gallery."""
    return _writable(QStandardPaths.StandardLocation.AppDataLocation)


def capture_scratch_directory() -> Path:
    """Where the camera writes new captures before they are imported."""
    path = _writable(QStandardPaths.StandardLocation.CacheLocation) / "captures"
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_gallery_directory(settings) -> Path:
    """Gallery directory from `gallery.directory`, else the app data directory."""
    configured = settings.get("gallery.directory")
    if configured:
        return Path(str(configured)).expanduser()
    return app_data_directory()


def media_library_directory(is_video: bool) -> Path:
    """Start directory for the pick dialogs (Movies or Pictures)."""
    location = (
        QStandardPaths.StandardLocation.MoviesLocation
        if is_video
        else QStandardPaths.StandardLocation.PicturesLocation
    )
    raw = QStandardPaths.writableLocation(location)
    return Path(raw) if raw else Path.home()
