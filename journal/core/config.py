# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Timestamps are stored in UTC; this only affects how they are rendered
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "journal")
        self.mongo_server_selection_timeout_ms: Final[int] = int(
            os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")
        )
        self.mongo_ensure_indexes: Final[bool] = _env_bool("MONGO_ENSURE_INDEXES", "true")

        # Collection Names
        self.entries_collection: Final[str] = os.getenv("ENTRIES_COLLECTION", "entries")

        # Google Sign-In Configuration
        self.google_client_id: Final[Optional[str]] = os.getenv("GOOGLE_CLIENT_ID") or None

        # Session Token Configuration
        self.session_secret_key: Final[str] = os.getenv("SESSION_SECRET_KEY", "")
        self.session_algorithm: Final[str] = os.getenv("SESSION_ALGORITHM", "HS256")
        self.session_expire_minutes: Final[int] = int(
            os.getenv("SESSION_EXPIRE_MINUTES", str(7 * 24 * 60))
        )
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "journal_session")
        self.cookie_secure: Final[bool] = _env_bool("COOKIE_SECURE", "true")

        # HTTP Configuration
        self.cors_allowed_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",")
            if origin.strip()
        ]

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
