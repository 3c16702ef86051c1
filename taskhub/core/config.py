"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Backend selection: "memory" (process-local) or "supabase" (hosted)

Usage:
    from taskhub.core.config import settings

    if settings.uses_supabase:
        base_url = settings.supabase_url
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskhub.core.enums import Environment

_AUTHORIZATION_DIR = Path(__file__).resolve().parent.parent / "infrastructure" / "authorization"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="TaskHub",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Public API base URL, used for problem type URIs",
    )
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )
    cors_origins: str = Field(
        default="http://localhost:5173",
        validate_default=True,
        description="Allowed CORS origins (comma-separated)",
    )

    # Backend selection
    backend: Literal["memory", "supabase"] = Field(
        default="memory",
        description="Record store and identity backend",
    )
    supabase_url: str | None = Field(
        default=None,
        description="Supabase project URL (e.g., https://xyz.supabase.co)",
    )
    supabase_anon_key: str | None = Field(
        default=None,
        description="Supabase anonymous API key",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for every call to the hosted backend",
    )

    # Authorization
    casbin_model_path: Path = Field(
        default=_AUTHORIZATION_DIR / "model.conf",
        description="Casbin RBAC model file",
    )
    casbin_policy_path: Path = Field(
        default=_AUTHORIZATION_DIR / "policy.csv",
        description="Casbin role capability policy file",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Reject non-positive timeouts."""
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    @field_validator("api_base_url", "supabase_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str | None: URL without trailing slash.
        """
        return v.rstrip("/") if v else v

    @field_validator("cors_origins")
    @classmethod
    def parse_cors_origins(cls, v: str) -> list[str]:
        """
        Parse comma-separated CORS origins.

        Args:
            v: Comma-separated origins string.

        Returns:
            list[str]: List of origin URLs.
        """
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    @model_validator(mode="after")
    def require_supabase_credentials(self) -> "Settings":
        """Supabase URL and key are mandatory for the supabase backend."""
        if self.backend == "supabase" and not (self.supabase_url and self.supabase_anon_key):
            raise ValueError(
                "supabase_url and supabase_anon_key are required when backend is 'supabase'"
            )
        return self

    @property
    def uses_supabase(self) -> bool:
        """True when the hosted Supabase backend is configured."""
        return self.backend == "supabase"

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
