"""Media type detection and file dialog helpers."""

from pathlib import Path

from core.models import MediaKind

IMAGE_EXTENSIONS = {
    ".jpg",
    ".jpeg",
    ".png",
    ".gif",
    ".bmp",
    ".webp",
    ".heic",
    ".heif",
    ".tif",
    ".tiff",
}
VIDEO_EXTENSIONS = {".mp4", ".mov", ".webm", ".avi", ".mkv", ".m4v", ".3gp"}


def is_video(path: str) -> bool:
    """Check if a file path is a video based on extension.

    Args:
        path: File path to check

    Returns:
        bool: True if the file is a video format
    """
    ext = Path(path).suffix.lower()
    return ext in VIDEO_EXTENSIONS


def name_filter(kind: MediaKind) -> str:
    """Build a QFileDialog name filter for `kind`.

    Example: "Photos (*.jpg *.jpeg ...)"
    """
    if kind is MediaKind.VIDEO:
        label, exts = "Videos", VIDEO_EXTENSIONS
    else:
        label, exts = "Photos", IMAGE_EXTENSIONS
    patterns = " ".join(f"*{ext}" for ext in sorted(exts))
    return f"{label} ({patterns})"
