"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    blog_api_base_url: str = Field(
        default="http://localhost:8080/api/blog",
        description="Base address of the blog REST backend",
    )
    request_timeout: float = Field(default=30.0, description="HTTP timeout in seconds")

    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional debug log file")

    @property
    def has_base_url(self) -> bool:
        """Check if a base address is configured."""
        return bool(self.blog_api_base_url.strip())

    def validate_base_url(self) -> None:
        """Raises ValueError if the base address is missing or not http(s)."""
        if not self.has_base_url:
            raise ValueError(
                "Missing required configuration: BLOG_API_BASE_URL. "
                "Please set it in your .env file or environment variables."
            )
        if not self.blog_api_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"BLOG_API_BASE_URL must be an http(s) URL, got '{self.blog_api_base_url}'"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
