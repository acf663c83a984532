"""Centralized configuration for maglo-search using Pydantic Settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``MAGLO_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MAGLO_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Search
    max_query_tokens: int = Field(
        default=0,
        ge=0,
        description="Maximum query tokens scored per search (0 scores every token)",
    )
    search_param: str = Field(default="search", min_length=1, description="URL parameter holding the free-text query")
    status_param: str = Field(default="status", min_length=1, description="URL parameter holding the status filter")

    # Telemetry
    service_name: str = Field(default="maglo-search", description="Service name reported to tracing")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return normalized.lower()

    def token_cap(self) -> int | None:
        """Query token cap for ranking, or None when unlimited."""
        return self.max_query_tokens or None
