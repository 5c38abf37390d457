"""Unit tests for src/core/config.py"""

import os
from unittest.mock import patch

import pytest

from src.core.config import DEFAULT_DATABASE_URL, LOG_FORMAT, Settings, configure_logging


def test_defaults() -> None:
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings.from_env()
    assert settings == Settings()
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert not settings.echo_sql
    assert settings.log_level == "INFO"


def test_from_env() -> None:
    environment = {
        "CUBE_CHESS_DATABASE_URL": "sqlite:///:memory:",
        "CUBE_CHESS_ECHO_SQL": "yes",
        "CUBE_CHESS_LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, environment, clear=True):
        settings = Settings.from_env()
    assert settings.database_url == "sqlite:///:memory:"
    assert settings.echo_sql
    assert settings.log_level == "debug"


def test_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        Settings(log_level="LOUD")


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        configure_logging(Settings(log_level="warning"))
    basic_config.assert_called_once_with(level="WARNING", format=LOG_FORMAT)
