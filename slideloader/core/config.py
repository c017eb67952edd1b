"""
Application settings using Pydantic for validation and type safety.
Values are loaded from environment variables or a local .env file.
"""
import re
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slideloader.models.slide import DEFAULT_SLIDE, PARAM_VALUE_PATTERN


class Settings(BaseSettings):
    """Application configuration."""

    # Application
    app_name: str = Field(default="SlideLoader", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")
    log_level: str = Field(default="INFO", description="Root logging level")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Slides
    slides_dir: Path = Field(
        default=Path("slides"),
        description="Directory holding the markdown decks, served under /slides"
    )
    slide_param: str = Field(
        default="slide",
        min_length=1,
        description="Query-string parameter that selects the deck"
    )
    default_slide: str = Field(
        default=DEFAULT_SLIDE,
        min_length=1,
        description="Deck shown when the query string does not select one"
    )
    remark_js_url: str = Field(
        default="https://remarkjs.com/downloads/remark-latest.min.js",
        description="Location of the remark.js bundle loaded by the page"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @property
    def slides_available(self) -> bool:
        """Check if the slides directory exists."""
        return self.slides_dir.is_dir()

    @field_validator("slides_dir")
    @classmethod
    def validate_slides_dir(cls, v: Path) -> Path:
        """Ensure slides directory path is a Path."""
        return Path(v)

    @field_validator("slide_param")
    @classmethod
    def validate_slide_param(cls, v: str) -> str:
        """Check the parameter name forms a valid pattern; it is matched unescaped."""
        try:
            re.compile(v + PARAM_VALUE_PATTERN)
        except re.error as e:
            raise ValueError(f"Invalid slide parameter name {v!r}: {e}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
