from __future__ import annotations

import os
from pathlib import Path
import sys

from loguru import logger
import pytest

from infrastructure.logging import find_latest_log_file, init_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_init_logging_writes_daily_file(tmp_path: Path, restore_logger) -> None:
    log_dir = tmp_path / "logs"

    returned = init_logging(str(log_dir), level="debug")
    logger.info("hello from test")
    logger.complete()
    logger.remove()

    assert returned == str(log_dir)
    latest = find_latest_log_file(str(log_dir))
    assert latest is not None
    assert latest.name.startswith("app_")
    assert "hello from test" in latest.read_text(encoding="utf-8")


def test_find_latest_log_file_picks_newest(tmp_path: Path) -> None:
    older = tmp_path / "app_20260101.log"
    newer = tmp_path / "app_20260102.log"
    older.write_text("a", encoding="utf-8")
    newer.write_text("b", encoding="utf-8")
    (tmp_path / "other.txt").write_text("c", encoding="utf-8")
    os.utime(older, (1_000_000, 1_000_000))
    os.utime(newer, (2_000_000, 2_000_000))

    assert find_latest_log_file(str(tmp_path)) == newer


def test_find_latest_log_file_missing_directory(tmp_path: Path) -> None:
    assert find_latest_log_file(str(tmp_path / "nope")) is None
