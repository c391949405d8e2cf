"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from loguru import logger

DEFAULTS: dict[str, Any] = {
    "gallery": {"directory": None},
    "storage": {"read_strategy": "auto", "chunk_size": 64 * 1024},
    "logging": {"level": "INFO", "directory": None},
    "window": {"width": 900, "height": 600},
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class JsonSettings:
    """JSON settings reader with dotted-key access.

    Values from the file are layered over `DEFAULTS`; a missing file leaves
    the defaults in place.
    """

    def __init__(self, settings_path: str | Path | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(DEFAULTS)
        self._path = Path(settings_path) if settings_path is not None else None
        if self._path is None:
            return
        if not self._path.exists():
            logger.info("settings.json not found, using defaults: {}", self._path)
            return
        with self._path.open("r", encoding="utf-8") as f:
            try:
                loaded = json.load(f)
            except json.JSONDecodeError as ex:
                raise ValueError(f"invalid settings file {self._path}: {ex}") from ex
        if not isinstance(loaded, dict):
            raise ValueError(f"invalid settings file {self._path}: top level must be an object")
        _merge(self._data, loaded)

    @property
    def path(self) -> Path | None:
        return self._path

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        node: Any = self._data
        for part in key.split("."):
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return default if node is None else node

    def get_int(self, key: str, default: int) -> int:
        """Return `key` as int, or `default` when missing or not numeric."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("Setting {} is not an integer: {!r}", key, value)
            return default
