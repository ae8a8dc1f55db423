"""
FastAPI application configuration using Pydantic Settings.

Provides centralized configuration for:
- Server binding (host/port)
- API metadata used by the OpenAPI document
- CORS and security headers
- Logging and metrics

All settings support environment variable overrides and .env file loading.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Variable names are unprefixed (e.g. PORT, DATABASE_URL) and matched
    case-insensitively.

    Environment variables are loaded from:
    1. System environment
    2. .env file in the current directory
    3. Default values defined below
    """

    # =========================================================================
    # API Settings
    # =========================================================================

    app_name: str = Field(
        default="Axum Backend API",
        description="Application name, used as the OpenAPI title"
    )
    app_version: str = Field(
        default="1.0.0",
        description="API version"
    )

    debug: bool = Field(
        default=False,
        description="Debug mode - enables auto-reload and error traces"
    )
    environment: str = Field(
        default="development",
        description="Environment: development|staging|production"
    )

    host: str = Field(
        default="0.0.0.0",
        description="API bind host"
    )
    port: int = Field(
        default=3000,
        description="API bind port",
        gt=0,
        lt=65536
    )

    # =========================================================================
    # Database Settings
    # =========================================================================

    # Accepted for compatibility with deployment manifests; no handler reads it.
    database_url: Optional[str] = Field(
        default=None,
        description="Database connection URL (currently unused)"
    )

    # =========================================================================
    # CORS Settings
    # =========================================================================

    cors_enabled: bool = Field(
        default=True,
        description="Enable CORS middleware"
    )
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    cors_allow_methods: List[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        description="Allowed HTTP methods"
    )
    cors_allow_headers: List[str] = Field(
        default=["*"],
        description="Allowed HTTP headers"
    )

    # =========================================================================
    # Security Settings
    # =========================================================================

    security_headers_enabled: bool = Field(
        default=True,
        description="Enable security headers (X-Frame-Options, etc.)"
    )

    # =========================================================================
    # Monitoring and Observability
    # =========================================================================

    metrics_enabled: bool = Field(
        default=True,
        description="Enable Prometheus request metrics and the /metrics endpoint"
    )

    # =========================================================================
    # Logging Settings
    # =========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level: DEBUG|INFO|WARNING|ERROR|CRITICAL"
    )
    log_format: str = Field(
        default="json",
        description="Log format: json|text"
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got: {v}")
        return v_upper

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is one of the allowed values."""
        allowed = ["development", "staging", "production"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got: {v}")
        return v_lower

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: List[str]) -> List[str]:
        """Fall back to allowing every origin when the list is empty."""
        if not v:
            return ["*"]
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        allowed = ["json", "text"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got: {v}")
        return v_lower

    # =========================================================================
    # Computed Properties
    # =========================================================================

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"

    # =========================================================================
    # Model Config
    # =========================================================================

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",          # Ignore unrelated environment variables
        validate_default=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once and shared
    across the application. Settings are loaded from:
    1. Environment variables (PORT, DATABASE_URL, LOG_LEVEL, ...)
    2. .env file in the current directory
    3. Default values

    Returns:
        Settings: Cached settings instance

    Example:
        >>> from api.src.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.port)
        3000
    """
    return Settings()


def clear_settings_cache():
    """
    Clear the settings cache.

    Useful for testing when you need to reload settings with different
    environment variables.

    Example:
        >>> from api.src.config import get_settings, clear_settings_cache
        >>> os.environ['PORT'] = '8080'
        >>> clear_settings_cache()
        >>> get_settings().port
        8080
    """
    get_settings.cache_clear()
