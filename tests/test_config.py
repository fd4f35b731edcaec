"""Simplified comprehensive tests for Config class."""

import logging
import os
from importlib import reload
from pathlib import Path
from unittest.mock import patch

import pytest

from ethioheritage import config as config_module
from ethioheritage.config import Config


def test_get_openai_api_key_from_env():
    """Test OpenAI API key retrieval from environment."""
    with patch.dict(os.environ, {"OPENAI_API_KEY": "test-api-key"}):
        assert Config.get_openai_api_key() == "test-api-key"


def test_get_openai_api_key_empty_when_not_set():
    """Test OpenAI API key returns empty string when not set."""
    with patch.dict(os.environ, {}, clear=True):
        assert not Config.get_openai_api_key()


def test_validate_passes_with_defaults():
    """Validation does not need an API key; the local responder covers it."""
    with patch.object(Config, "get_openai_api_key", return_value=""):
        Config.validate()


@pytest.mark.parametrize(
    "config_attr",
    [
        "HISTORY_WINDOW",
        "PROMPT_HISTORY_MESSAGES",
        "MESSAGE_MAX_LENGTH",
        "CHAT_ARCHIVE_LIMIT",
        "CHAT_HISTORY_PAGE_SIZE",
    ],
)
@pytest.mark.parametrize("bad_value", [0, -5])
def test_validate_rejects_non_positive_limits(config_attr, bad_value):
    with (
        patch.object(Config, config_attr, bad_value),
        pytest.raises(ValueError, match=f"{config_attr} must be a positive integer"),
    ):
        Config.validate()


@pytest.mark.parametrize(
    ("enabled", "api_key", "expected"),
    [
        (True, "test-key", True),
        (True, "", False),
        (False, "test-key", False),
        (False, "", False),
    ],
)
def test_remote_chat_available(enabled, api_key, expected):
    with (
        patch.object(Config, "REMOTE_CHAT_ENABLED", enabled),
        patch.object(Config, "get_openai_api_key", return_value=api_key),
    ):
        assert Config.remote_chat_available() is expected


@pytest.mark.parametrize(
    ("env_var", "config_attr", "default_value", "test_value", "expected_type"),
    [
        ("LOG_LEVEL", "LOG_LEVEL", "INFO", "debug", str),
        ("OPENAI_LOG_LEVEL", "OPENAI_LOG_LEVEL", "WARNING", "error", str),
        ("ENVIRONMENT", "ENVIRONMENT", "development", "production", str),
        ("CHAT_MODEL", "CHAT_MODEL", "gpt-3.5-turbo", "gpt-4o-mini", str),
        ("API_USER_AGENT", "API_USER_AGENT", "EthioHeritage360/1.0", "Kiosk/2", str),
        ("CHAT_MAX_TOKENS", "CHAT_MAX_TOKENS", 500, "1000", int),
        ("HISTORY_WINDOW", "HISTORY_WINDOW", 10, "20", int),
        ("PROMPT_HISTORY_MESSAGES", "PROMPT_HISTORY_MESSAGES", 6, "4", int),
        ("MESSAGE_MAX_LENGTH", "MESSAGE_MAX_LENGTH", 1000, "2000", int),
        ("CHAT_ARCHIVE_LIMIT", "CHAT_ARCHIVE_LIMIT", 100, "25", int),
        ("CHAT_HISTORY_PAGE_SIZE", "CHAT_HISTORY_PAGE_SIZE", 50, "10", int),
        ("CHAT_TEMPERATURE", "CHAT_TEMPERATURE", 0.7, "0.5", float),
        ("CHAT_PRESENCE_PENALTY", "CHAT_PRESENCE_PENALTY", 0.1, "0.3", float),
        ("CHAT_FREQUENCY_PENALTY", "CHAT_FREQUENCY_PENALTY", 0.1, "0.2", float),
    ],
)
def test_config_loading_from_env(
    env_var, config_attr, default_value, test_value, expected_type
):
    with patch.dict(os.environ, {}, clear=True):
        reload(config_module)
        actual_default = getattr(config_module.Config, config_attr)
        assert actual_default == default_value

    with patch.dict(os.environ, {env_var: test_value}):
        reload(config_module)
        actual_value = getattr(config_module.Config, config_attr)
        if expected_type is int:
            expected = int(test_value)
        elif expected_type is float:
            expected = float(test_value)
        elif config_attr in {"LOG_LEVEL", "OPENAI_LOG_LEVEL"}:
            expected = test_value.upper()
        else:
            expected = test_value
        assert actual_value == expected


@pytest.mark.parametrize(
    ("env_value", "expected"),
    [
        (None, True),
        ("true", True),
        ("1", True),
        ("YES", True),
        (" on ", True),
        ("false", False),
        ("0", False),
        ("off", False),
    ],
)
def test_remote_chat_flag_from_env(env_value, expected):
    env = {} if env_value is None else {"REMOTE_CHAT_ENABLED": env_value}
    with patch.dict(os.environ, env, clear=True):
        reload(config_module)
        assert config_module.Config.REMOTE_CHAT_ENABLED is expected


def test_history_db_path_loading():
    """Test Path configuration loading from environment variables."""
    with patch.dict(os.environ, {}, clear=True):
        reload(config_module)
        default_path = config_module.Config.CHAT_HISTORY_DB_PATH
        assert isinstance(default_path, Path)
        assert default_path == Path("data/chat_history.db")

    with patch.dict(os.environ, {"CHAT_HISTORY_DB_PATH": "/custom/path/chat.db"}):
        reload(config_module)
        assert config_module.Config.CHAT_HISTORY_DB_PATH == Path(
            "/custom/path/chat.db"
        )


def test_openai_base_url_from_env():
    """Test OpenAI base URL loading from environment."""
    with patch.dict(os.environ, {"OPENAI_BASE_URL": "https://custom.openai.com"}):
        reload(config_module)
        assert config_module.Config.OPENAI_BASE_URL == "https://custom.openai.com"


@pytest.mark.parametrize(
    ("env_value", "is_dev", "is_prod"),
    [
        ("development", True, False),
        ("DEVELOPMENT", True, False),
        ("production", False, True),
        ("PRODUCTION", False, True),
        ("staging", False, False),
    ],
)
def test_environment_detection(env_value, is_dev, is_prod):
    """Test environment detection methods."""
    with patch.object(Config, "ENVIRONMENT", env_value):
        assert Config.is_development() == is_dev
        assert Config.is_production() == is_prod


@pytest.mark.parametrize(
    ("log_level", "openai_level", "expected_level", "expected_openai_level"),
    [
        ("INFO", "WARNING", logging.INFO, logging.WARNING),
        ("DEBUG", "ERROR", logging.DEBUG, logging.ERROR),
        ("INVALID", "INVALID", logging.INFO, logging.WARNING),
    ],
)
def test_setup_logging_levels(
    log_level, openai_level, expected_level, expected_openai_level
):
    """Verify logging setup respects overrides and falls back on invalid values."""
    with (
        patch.object(Config, "LOG_LEVEL", log_level),
        patch.object(Config, "OPENAI_LOG_LEVEL", openai_level),
        patch("ethioheritage.config.logging.basicConfig") as mock_basic,
        patch("ethioheritage.config.logging.getLogger") as mock_get_logger,
    ):
        mock_logger = mock_get_logger.return_value

        Config.setup_logging()

        mock_basic.assert_called_once_with(
            level=expected_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        mock_get_logger.assert_called_once_with("openai")
        mock_logger.setLevel.assert_called_once_with(expected_openai_level)


def test_get_logger():
    """Test logger creation with specified name."""
    with patch("ethioheritage.config.logging.getLogger") as mock_get_logger:
        mock_logger = mock_get_logger.return_value

        result = Config.get_logger("test.module")

        mock_get_logger.assert_called_once_with("test.module")
        assert result == mock_logger


@pytest.mark.parametrize(
    ("user_agent", "expected"),
    [
        ("EthioHeritage360/1.0", {"User-Agent": "EthioHeritage360/1.0"}),
        ("", {}),
    ],
)
def test_get_api_headers(user_agent, expected):
    with patch.object(Config, "API_USER_AGENT", user_agent):
        assert Config.get_api_headers() == expected


@pytest.mark.parametrize(
    ("env_var", "invalid_value", "error_match"),
    [
        ("HISTORY_WINDOW", "not_a_number", "invalid literal for int"),
        ("CHAT_TEMPERATURE", "not_a_float", "could not convert string to float"),
    ],
)
def test_type_conversion_errors(env_var, invalid_value, error_match):
    """Test handling of invalid type conversions."""
    with (
        patch.dict(os.environ, {env_var: invalid_value}),
        pytest.raises(ValueError, match=error_match),
    ):
        reload(config_module)


def test_no_dotenv_loading_when_missing():
    """Test that .env file loading is skipped when file doesn't exist."""
    with (
        patch.object(Path, "exists", return_value=False),
        patch("ethioheritage.config.load_dotenv") as mock_load,
    ):
        reload(config_module)

        mock_load.assert_not_called()
