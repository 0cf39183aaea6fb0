"""Configuration management for the slug redirect service."""

from typing import Optional, Dict, Any
from urllib.parse import urlparse, urlunparse

from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration.

    DEFAULT_URL, CONNECTION_STRING and API_KEY have no defaults; constructing
    a Config without them raises pydantic.ValidationError.
    """

    # Required settings
    default_url: str = Field(
        ...,
        description="Redirect target for unknown slugs or store failures"
    )

    connection_string: str = Field(
        ...,
        description="Store connection URL (postgresql://... or memory://)"
    )

    api_key: str = Field(
        ...,
        min_length=1,
        description="Secret required to register new slugs"
    )

    # Database settings
    pool_min_size: int = Field(
        default=1,
        ge=0,
        description="Minimum size of the connection pool"
    )

    pool_max_size: int = Field(
        default=10,
        ge=1,
        description="Maximum size of the connection pool"
    )

    command_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for acquiring a connection and running a query"
    )

    create_tables: bool = Field(
        default=False,
        description="Create the urls table at startup if it does not exist"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. 1 = single process (async handles many connections); >1 = multi-process."
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    def safe_dump(self) -> Dict[str, Any]:
        """Dump settings for logging with secrets masked."""
        data = self.model_dump()
        data["api_key"] = "***"
        data["connection_string"] = _mask_password(self.connection_string)
        return data


def _mask_password(connection_string: str) -> str:
    parsed = urlparse(connection_string)
    if not parsed.password:
        return connection_string
    userinfo, _, hostport = parsed.netloc.rpartition("@")
    user = userinfo.split(":", 1)[0]
    netloc = f"{user}:***@{hostport}"
    return urlunparse(parsed._replace(netloc=netloc))


def load_config(**overrides) -> Config:
    """Load configuration from environment (and .env file)."""
    return Config(**overrides)
