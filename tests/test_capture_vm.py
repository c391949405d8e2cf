from __future__ import annotations

import pytest

from app.viewmodels.capture_vm import CaptureVM
from app.views.media_utils import is_video, name_filter
from core.models import CaptureRecord, MediaKind


@pytest.mark.parametrize(
    ("path", "kind"),
    [
        ("/g/IMG_1.jpg", MediaKind.PHOTO),
        ("/g/VID_1.MP4", MediaKind.VIDEO),
        ("/g/clip.mov", MediaKind.VIDEO),
        ("/g/readme", MediaKind.PHOTO),
    ],
)
def test_capture_vm_kind_from_extension(path: str, kind: MediaKind) -> None:
    row = CaptureVM(CaptureRecord(file_name=path.rsplit("/", 1)[-1], path=path))

    assert row.kind is kind
    assert row.tooltip == path
    assert row.file_name == path.rsplit("/", 1)[-1]


def test_is_video_is_case_insensitive() -> None:
    assert is_video("A.WEBM")
    assert not is_video("a.png")


def test_name_filter_lists_extensions() -> None:
    photos = name_filter(MediaKind.PHOTO)
    videos = name_filter(MediaKind.VIDEO)

    assert photos.startswith("Photos (") and "*.jpg" in photos and "*.mp4" not in photos
    assert videos.startswith("Videos (") and "*.mp4" in videos and "*.jpg" not in videos
