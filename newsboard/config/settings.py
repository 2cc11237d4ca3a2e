"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings shared by the gateway, comments and censor services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="newsboard", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production", "testing"] = Field(
        default="development", description="Environment name"
    )
    debug: bool = Field(default=True, description="Debug mode")

    # Network
    host: str = Field(default="localhost", description="Bind host for every service")
    gateway_port: int = Field(default=8080, description="Gateway port")
    comments_port: int = Field(default=8081, description="Comment store port")
    censor_port: int = Field(default=8082, description="Content filter port")

    # Downstream services (used by the gateway)
    comments_service_url: str = Field(
        default="http://localhost:8081", description="Comment store base URL"
    )
    censor_service_url: str = Field(
        default="http://localhost:8082", description="Content filter base URL"
    )
    downstream_timeout_seconds: float = Field(
        default=10.0, description="Timeout for each downstream HTTP call"
    )

    # Lifecycle
    shutdown_grace_period_seconds: int = Field(
        default=5, description="Time allowed for in-flight requests on shutdown"
    )

    # Domain
    censor_denylist: list[str] = Field(
        default=["qwerty", "йцукен", "zxvbnm"],
        description="Substrings rejected by the content filter (case-insensitive)",
    )
    news_page_size: int = Field(default=10, ge=1, description="News items per page")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", description="Log format"
    )
    log_include_caller_info: bool = Field(
        default=False, description="Include caller info"
    )
    log_file_enabled: bool = Field(default=True, description="Write rotating log files")
    log_dir: str = Field(default="logs", description="Directory for log files")
    log_file_max_bytes: int = Field(
        default=10 * 1024 * 1024, description="Max size per log file (10MB default)"
    )
    log_file_backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )
    log_requests: bool = Field(
        default=True, description="Log HTTP request start/finish"
    )
    log_exclude_paths: list[str] = Field(
        default=["/health", "/health/live", "/health/ready"],
        description="Paths to exclude from request logging",
    )

    # CORS (gateway only)
    cors_origins: list[str] = Field(default=["*"], description="CORS origins")
    cors_allow_methods: list[str] = Field(default=["*"], description="Allowed methods")
    cors_allow_headers: list[str] = Field(default=["*"], description="Allowed headers")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
