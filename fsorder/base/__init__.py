"""Low-level shared utilities for fsorder."""

from .logging import FsorderLogger, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "FsorderLogger",
]
