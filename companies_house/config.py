"""
Configuration management using Pydantic Settings.
Loads from environment variables and .env file.
"""
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Companies House API
    companies_house_api_key: str | None = Field(
        default=None,
        description="Companies House REST API key (sent as basic auth user)"
    )
    companies_house_api_url: str = Field(
        default="https://api.company-information.service.gov.uk",
        description="Companies House public data API base URL"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format"
    )

    # Performance
    max_parallel_tasks: int = Field(default=4, ge=1, description="Max concurrent lookups")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout")
    max_retries: int = Field(default=3, ge=1, description="Max attempts per request")
    retry_wait_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Base delay for exponential retry backoff"
    )

    def get_auth(self) -> tuple[str, str] | None:
        """Basic auth pair for the API: key as user name, empty password."""
        if not self.companies_house_api_key:
            return None
        return (self.companies_house_api_key, "")


# Global settings instance
settings = Settings()
