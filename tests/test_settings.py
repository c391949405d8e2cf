from __future__ import annotations

import json
from pathlib import Path

import pytest

from infrastructure.paths import resolve_gallery_directory
from infrastructure.settings import JsonSettings


def test_defaults_apply_without_file(tmp_path: Path) -> None:
    settings = JsonSettings(tmp_path / "missing.json")

    assert settings.get("storage.read_strategy") == "auto"
    assert settings.get_int("storage.chunk_size", 1) == 65536
    assert settings.get("gallery.directory") is None
    assert settings.get("gallery.directory", "fallback") == "fallback"
    assert settings.get("no.such.key", 7) == 7


def test_file_values_override_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"storage": {"read_strategy": "path"}, "window": {"width": 1280}}),
        encoding="utf-8",
    )

    settings = JsonSettings(path)

    assert settings.get("storage.read_strategy") == "path"
    assert settings.get("storage.chunk_size") == 65536
    assert settings.get_int("window.width", 0) == 1280
    assert settings.get_int("window.height", 0) == 600


def test_get_int_falls_back_on_bad_value(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"storage": {"chunk_size": "big"}}), encoding="utf-8")

    assert JsonSettings(path).get_int("storage.chunk_size", 4096) == 4096


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_invalid_file_raises_value_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="invalid settings file"):
        JsonSettings(path)


def test_gallery_directory_override(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    target = tmp_path / "my-gallery"
    path.write_text(json.dumps({"gallery": {"directory": str(target)}}), encoding="utf-8")

    assert resolve_gallery_directory(JsonSettings(path)) == target
