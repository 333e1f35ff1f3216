import logging

import pytest

from railroad.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from RAILROAD_* variables and cached settings."""
    for name in ("RAILROAD_GRAPH_SPECIFICATION", "RAILROAD_LOG_LEVEL", "RAILROAD_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()
    logger = logging.getLogger("railroad")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
