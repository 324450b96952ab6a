"""Application settings and configuration."""

from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Session Ledger"
    app_version: str = "0.1.0"
    environment: Literal["development", "test", "production"] = "development"

    # Backing services
    database_url: str = "sqlite:///./ledger.db"
    redis_url: str = "redis://localhost:6379/0"

    # Summary cache policy
    summary_cache_ttl_seconds: int = 60
    summary_invalidate_on_write: bool = False
    summary_cache_fallback: bool = False

    # Global per-client request limit; development always allows 1000
    rate_limit_max: int = 100
    rate_limit_window_seconds: int = 60

    log_level: str = "INFO"

    # Server binding (entrypoint only)
    host: str = "127.0.0.1"
    port: int = 3333

    @property
    def is_production(self) -> bool:
        """Return True when running with production cookie rules."""
        return self.environment == "production"

    @property
    def rate_limit_per_window(self) -> int:
        """Requests allowed per client per window in the current environment."""
        if self.environment == "development":
            return 1000
        return self.rate_limit_max


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
