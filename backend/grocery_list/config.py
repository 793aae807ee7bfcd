"""Configuration management for grocery-list."""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GROCERY_",
        env_file=("../.env", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Form server
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    environment: str = "development"
    log_level: str = "info"

    # Files
    input_file: str = "items.txt"
    output_csv: str = "grocery-list.csv"

    # Form replay
    form_base_url: str = "http://localhost:3000"
    request_timeout_s: float = 10.0
    # Pause between submissions, picked at random in this range
    submit_delay_min_s: float = 2.0
    submit_delay_max_s: float = 4.0

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
