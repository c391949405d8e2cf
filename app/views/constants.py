"""
UI/view constants centralized for reuse across view modules.
"""

from __future__ import annotations

from PySide6.QtCore import Qt

WINDOW_TITLE: str = "Gallery Camera"

# Command names double as action keys and button labels
CMD_CAPTURE_PHOTO: str = "capture_photo"
CMD_CAPTURE_VIDEO: str = "capture_video"
CMD_ADD_PHOTO: str = "add_photo"
CMD_ADD_VIDEO: str = "add_video"
CMD_OPEN_PHOTO: str = "open_photo"

COMMAND_LABELS: dict[str, str] = {
    CMD_CAPTURE_PHOTO: "Capture Photo",
    CMD_CAPTURE_VIDEO: "Capture Video",
    CMD_ADD_PHOTO: "Add Photo",
    CMD_ADD_VIDEO: "Add Video",
}

# Data roles
RECORD_ROLE: int = Qt.UserRole  # CaptureRecord stored on each list item

BUSY_MESSAGE: str = "Working…"

DEFAULT_WINDOW_WIDTH: int = 900  # overridable by settings.json
DEFAULT_WINDOW_HEIGHT: int = 600
LIST_ICON_PX: int = 32
