"""Application configuration using Pydantic Settings."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WORKLOG_",
    )

    # Storage
    data_dir: Path = Path("./data")

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8000"

    # Live clock cadence for the running-session display
    tick_seconds: float = 1.0

    # Ledger defaults
    default_hourly_rate: float = 0.0

    # Currency display
    currency_symbol: str = "R$"
    decimal_separator: str = ","
    thousands_separator: str = "."

    # Backup files
    backup_prefix: str = "worklog-backup"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


settings = Settings()
