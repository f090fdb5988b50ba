from __future__ import annotations

import logging

import pytest

from fsorder.base.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_fsorder_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logger._initialized = False  # type: ignore[attr-defined]
