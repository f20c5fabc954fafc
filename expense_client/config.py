"""
Application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # App
    app_name: str = "Expense Tracker"
    log_level: str = "INFO"

    # Remote API
    api_url: str = "http://localhost:5000/api"

    # Local storage for the session credential and user
    storage_url: str = "sqlite:///./data/storage.sqlite"

    # Notifications
    toast_duration_seconds: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False
    )
