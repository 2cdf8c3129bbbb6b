import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config files, RUSH_* variables and log handlers out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("RUSH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RUSH_LOG_FILE", raising=False)
    yield
    logger = logging.getLogger("rush")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
