from __future__ import annotations

import logging
from pathlib import Path

from fsorder.base.logging import (
    FsorderLogger,
    FsorderRichHandler,
    get_logger,
    normalize_level,
    normalize_use_rich,
    setup_logging,
)


def test_normalize_level() -> None:
    assert normalize_level("debug") == "DEBUG"
    assert normalize_level(" warning ") == "WARNING"
    assert normalize_level(logging.ERROR) == "ERROR"
    assert normalize_level("chatty") == "INFO"
    assert normalize_level(None) == "INFO"


def test_normalize_use_rich() -> None:
    assert normalize_use_rich("auto") is None
    assert normalize_use_rich("yes") is True
    assert normalize_use_rich("off") is False
    assert normalize_use_rich(True) is True
    assert normalize_use_rich(3) is None


def test_get_logger_returns_children_of_root() -> None:
    child = get_logger("fsorder.listing")
    same = get_logger("listing")

    assert child is same
    assert child.name == "fsorder.listing"
    assert get_logger().name == "fsorder"


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    logger = setup_logging(level="debug", use_rich=False, log_dir=tmp_path / "logs", file_prefix="run")

    assert isinstance(logger, FsorderLogger)
    assert logger.level == logging.DEBUG
    assert logger.rich_enabled is False
    assert logger.log_file is not None
    assert logger.log_file.parent == tmp_path / "logs"
    assert logger.log_file.name.startswith("run_")

    get_logger("fsorder.listing").warning("listing frames")
    content = logger.log_file.read_text(encoding="utf-8")
    assert "[WARNING] fsorder.listing: listing frames" in content


def test_setup_logging_without_log_dir_skips_file() -> None:
    logger = setup_logging(level="INFO", use_rich=True)

    assert logger.log_file is None
    assert logger.rich_enabled is True
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], FsorderRichHandler)


def test_setup_logging_rebuilds_handlers(tmp_path: Path) -> None:
    setup_logging(use_rich=False, log_dir=tmp_path)
    logger = setup_logging(use_rich=False)

    assert len(logger.handlers) == 1
    assert logger.log_file is None
