"""
Configuration management using Pydantic Settings
Loads and validates environment variables from .env file
"""

from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.pananames.com"
DEFAULT_USER_AGENT = "pananames-python"
DEFAULT_TIMEOUT = 30.0


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables.
    Every value can be overridden again when the client is constructed.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Pananames API Configuration
    pananames_token: str = Field(
        default="",
        description="Merchant API signature sent in the SIGNATURE header"
    )
    pananames_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API host; the versioned /merchant/v2/ prefix is always appended"
    )
    pananames_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request"
    )
    pananames_timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Default per-request timeout in seconds"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: str = Field(
        default="",
        description="Optional log file name written under logs/"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("pananames_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Base URL must be an absolute http(s) URL"""
        check_base_url(v)
        return v

    @field_validator("pananames_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("pananames_timeout must be greater than zero")
        return v


def check_base_url(url: str) -> str:
    """
    Check that url is an absolute http(s) URL with a host.

    Returns:
        The scheme://host[:port] part of the URL

    Raises:
        ValueError: If the URL can't be used as an API base URL
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise ValueError(f"Invalid base URL {url!r}: {e}") from e

    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(
            f"Invalid base URL {url!r}: expected an absolute http(s) URL such as {DEFAULT_BASE_URL}"
        )
    return f"{parts.scheme}://{parts.netloc}"


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment and .env file on first call.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables are invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
