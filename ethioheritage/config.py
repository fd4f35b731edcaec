"""Configuration management for the EthioHeritage360 chat assistant."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"

if env_path.exists():
    load_dotenv(env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # OpenAI Configuration
    @classmethod
    def get_openai_api_key(cls) -> str:
        """Get OpenAI API key from environment variables.

        Returns:
            OpenAI API key from environment or empty string if not set.
        """
        return os.getenv("OPENAI_API_KEY", "")

    OPENAI_BASE_URL: str | None = os.getenv("OPENAI_BASE_URL")

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    OPENAI_LOG_LEVEL: str = os.getenv("OPENAI_LOG_LEVEL", "WARNING").upper()

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Remote Chat Model Configuration
    REMOTE_CHAT_ENABLED: bool = _env_flag("REMOTE_CHAT_ENABLED", "true")
    CHAT_MODEL: str = os.getenv("CHAT_MODEL", "gpt-3.5-turbo")
    CHAT_MAX_TOKENS: int = int(os.getenv("CHAT_MAX_TOKENS", "500"))
    CHAT_TEMPERATURE: float = float(os.getenv("CHAT_TEMPERATURE", "0.7"))
    CHAT_PRESENCE_PENALTY: float = float(os.getenv("CHAT_PRESENCE_PENALTY", "0.1"))
    CHAT_FREQUENCY_PENALTY: float = float(
        os.getenv("CHAT_FREQUENCY_PENALTY", "0.1")
    )

    # Conversation Configuration
    HISTORY_WINDOW: int = int(os.getenv("HISTORY_WINDOW", "10"))
    PROMPT_HISTORY_MESSAGES: int = int(os.getenv("PROMPT_HISTORY_MESSAGES", "6"))
    MESSAGE_MAX_LENGTH: int = int(os.getenv("MESSAGE_MAX_LENGTH", "1000"))

    # Chat Archive Configuration
    CHAT_HISTORY_DB_PATH: Path = Path(
        os.getenv("CHAT_HISTORY_DB_PATH", "data/chat_history.db")
    )
    CHAT_ARCHIVE_LIMIT: int = int(os.getenv("CHAT_ARCHIVE_LIMIT", "100"))
    CHAT_HISTORY_PAGE_SIZE: int = int(os.getenv("CHAT_HISTORY_PAGE_SIZE", "50"))

    # API Header Configuration
    API_USER_AGENT: str = os.getenv("API_USER_AGENT", "EthioHeritage360/1.0")

    @classmethod
    def validate(cls) -> None:
        """Validate configured limits.

        Raises:
            ValueError: If a history or length limit is not a positive integer.
        """
        limits = {
            "HISTORY_WINDOW": cls.HISTORY_WINDOW,
            "PROMPT_HISTORY_MESSAGES": cls.PROMPT_HISTORY_MESSAGES,
            "MESSAGE_MAX_LENGTH": cls.MESSAGE_MAX_LENGTH,
            "CHAT_ARCHIVE_LIMIT": cls.CHAT_ARCHIVE_LIMIT,
            "CHAT_HISTORY_PAGE_SIZE": cls.CHAT_HISTORY_PAGE_SIZE,
        }
        for name, value in limits.items():
            if value <= 0:
                msg = f"{name} must be a positive integer, got {value}"
                raise ValueError(msg)

    @classmethod
    def remote_chat_available(cls) -> bool:
        """Check whether the remote chat model should be attempted.

        Returns:
            True if remote chat is enabled and an API key is configured.
        """
        return cls.REMOTE_CHAT_ENABLED and bool(cls.get_openai_api_key())

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment.

        Returns:
            True if environment is development.
        """
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment.

        Returns:
            True if environment is production.
        """
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def setup_logging(cls) -> None:
        """Setup basic logging configuration.

        Configure logging once at application startup with:
        - Console output for all levels
        - Simple, readable format
        - Configurable level via environment variable
        """
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL, logging.INFO),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )

        # Configure third-party library log levels via environment variables
        logging.getLogger("openai").setLevel(
            getattr(logging, cls.OPENAI_LOG_LEVEL, logging.WARNING)
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger with the specified name.

        Args:
            name: Logger name (typically __name__)

        Returns:
            Logger instance
        """
        return logging.getLogger(name)

    @classmethod
    def get_api_headers(cls) -> dict[str, str]:
        """Build default headers for outbound API calls.

        Returns:
            Mapping of header names to values used on outbound HTTP requests.
        """
        headers: dict[str, str] = {}

        if cls.API_USER_AGENT:
            headers["User-Agent"] = cls.API_USER_AGENT

        return headers


config = Config()
