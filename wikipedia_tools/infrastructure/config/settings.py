"""
Configuration settings - Infrastructure component for managing application configuration.
Uses Pydantic for validation and environment variable loading.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.models.errors import ConfigurationError
from ...domain.models.wikipedia import ClientConfig

_DEFAULT_STATUS_CODES = "500,502,503,504,429,408"


def _check_base_url(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    if not v:
        return None
    if not (v.startswith("http://") or v.startswith("https://")):
        raise ValueError("baseUrl must start with http:// or https://")
    return v.rstrip("/")


class WikipediaConfig(BaseModel):
    """The ``wikipedia`` slice of the host configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    base_url: Optional[str] = Field(None, alias="baseUrl")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        return _check_base_url(v)

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(base_url=self.base_url)


def parse_config_slice(data: Any, model: type = WikipediaConfig) -> Optional[BaseModel]:
    """Validate a raw slice; None/absent stays None."""
    if data is None:
        return None
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {model.__name__}: {e}") from e


class WikipediaSettings(BaseSettings):
    """Wikipedia service configuration from the environment."""

    model_config = SettingsConfigDict(env_prefix="WIKIPEDIA_", env_file=".env", extra="ignore")

    base_url: Optional[str] = None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        return _check_base_url(v)


class RetrySettings(BaseSettings):
    """Retry and timeout configuration for the HTTP transport."""

    model_config = SettingsConfigDict(
        env_prefix="WIKIPEDIA_", env_file=".env", extra="ignore", populate_by_name=True
    )

    max_retries: int = Field(3, ge=0)
    backoff_base: float = Field(0.5, ge=0.0, validation_alias="WIKIPEDIA_RETRY_BACKOFF_BASE")
    backoff_max: float = Field(8.0, ge=0.0, validation_alias="WIKIPEDIA_RETRY_BACKOFF_MAX")
    jitter: float = Field(0.1, ge=0.0, le=1.0, validation_alias="WIKIPEDIA_RETRY_JITTER")

    connect_timeout_s: float = 5.0
    read_timeout_s: float = 20.0

    # Comma-separated, e.g. "500,502,503"
    retryable_status_codes: str = _DEFAULT_STATUS_CODES

    @field_validator("retryable_status_codes")
    @classmethod
    def validate_status_codes(cls, v):
        try:
            [int(code.strip()) for code in v.split(",") if code.strip()]
        except ValueError:
            return _DEFAULT_STATUS_CODES
        return v

    @property
    def status_code_list(self) -> List[int]:
        return [int(code.strip()) for code in self.retryable_status_codes.split(",") if code.strip()]


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)

    wikipedia: WikipediaSettings = Field(default_factory=WikipediaSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            return "INFO"
        return v.upper()

    def host_config(self) -> Dict[str, Any]:
        """Host config mapping; the wikipedia slice is present only when configured."""
        if self.wikipedia.base_url:
            return {"wikipedia": {"baseUrl": self.wikipedia.base_url}}
        return {}


# Global settings instance
_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """Get global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Reload settings from environment (for testing)."""
    global _settings
    _settings = AppSettings()
    return _settings
