"""Configuration management using Pydantic Settings"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "bhxh-calculator"
    log_level: str = "INFO"

    # Calculation
    reference_tables_path: Optional[str] = None  # JSON file overriding the built-in tables


settings = Settings()
