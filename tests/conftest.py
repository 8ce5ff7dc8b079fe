import sys
from pathlib import Path

# Ensure the project root is on sys.path so `solver` and `cli` are importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging

import pytest


@pytest.fixture
def reset_loggers():
    """Undo setup_logging() so handlers do not leak between tests."""
    yield
    for name in ("solver", "cli"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
