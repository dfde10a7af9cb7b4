"""Configuration management for Signal OS."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Sandboxed environments may not expose .env; rely on the process environment
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    SIGNAL_OS_ENV: str = Field(default="dev", description="Environment: dev, test, prod")

    # Persistence (single storage slot)
    STORAGE_DIR: str = Field(
        default=".signal_os", description="Directory holding the file-backed storage slot"
    )
    STORAGE_KEY: str = Field(
        default="qtmbg-signal-os", description="Key of the single assessment storage slot"
    )

    # Transmission (optional remote collector)
    TRANSMIT_ENDPOINT: str | None = Field(
        default=None, description="Collector URL for report submissions; unset disables sending"
    )
    TRANSMIT_TIMEOUT_SECONDS: float = Field(
        default=15.0, description="Transport timeout for report submissions"
    )

    # Export and hand-off
    EXPORT_DIR: str = Field(default=".", description="Default directory for report exports")
    AUDIT_URL: str = Field(
        default="https://audit.qtmbg.com/", description="Base URL of the audit booking page"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
