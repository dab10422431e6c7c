"""Client configuration and logging setup."""

import json
import logging
import pathlib

import pydantic
import structlog

from .urls import DEFAULT_ENDPOINT

CONFIG_ENV_VAR = "DIGITALOCEAN_CONFIG_PATH"

DEFAULT_TIMEOUT = 30.0


class ClientConfig(pydantic.BaseModel):
    """Configuration for the DigitalOcean API client."""

    endpoint: str = pydantic.Field(
        DEFAULT_ENDPOINT,
        description="API base endpoint (scheme, host and version prefix)",
    )
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    raise_for_status: bool = pydantic.Field(
        False,
        description="Raise ApiError on non-2xx responses instead of returning the body",
    )
    token_file: str | None = pydantic.Field(
        None,
        description="Path to file containing the API token",
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")

    @pydantic.field_validator("endpoint")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        if not value:
            msg = "endpoint cannot be empty"
            raise ValueError(msg)
        return value if value.endswith("/") else f"{value}/"


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str | pathlib.Path) -> ClientConfig:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)
