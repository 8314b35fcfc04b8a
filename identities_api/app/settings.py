"""This file contains global application settings."""

from os import path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DOTENV_FILE = ".env" if path.isfile(".env") else None


class Settings(BaseSettings):
    """Application settings."""

    # Application
    environment: str = Field(default="Production", min_length=1)
    application_name: str = "AzureIdentitiesApi"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    https_redirect: bool = True

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=DOTENV_FILE, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def is_development(self) -> bool:
        """Whether the service runs in the development environment."""
        return self.environment.lower() == "development"
