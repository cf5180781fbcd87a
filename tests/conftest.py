"""Shared fixtures."""
import logging

import pytest

from config import Config


@pytest.fixture
def isolated_config():
    """Restore the cached configuration after the test."""
    saved = (Config._config, Config._config_file)
    yield Config
    Config._config, Config._config_file = saved


@pytest.fixture
def config_override(isolated_config):
    """Replace the cached configuration with defaults plus the given sections."""
    def _apply(**sections):
        config = Config._get_defaults()
        for section, values in sections.items():
            config[section] = {**config.get(section, {}), **values}
        Config._config = config
        return config
    return _apply


@pytest.fixture
def restore_root_logger(monkeypatch):
    """Give the test its own root handler list and close what it installs."""
    root_logger = logging.getLogger()
    level = root_logger.level
    monkeypatch.setattr(root_logger, "handlers", [])
    yield root_logger
    for handler in root_logger.handlers:
        handler.close()
    root_logger.setLevel(level)
