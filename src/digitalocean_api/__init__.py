"""DigitalOcean API client.

Thin synchronous client for the DigitalOcean v2 REST API covering droplets,
droplet actions, domains and domain records, images, SSH keys, regions,
sizes and account actions. Every call is a single HTTP exchange that
returns the parsed JSON response.

Exports:
    DigitalOcean: Catalog of named API operations.
    DigitalOceanClient: HTTP client with bearer-token authentication.
    ClientConfig: Pydantic model for client configuration.
    create_api: Build a configured DigitalOcean facade.
"""

from .api import DigitalOcean, create_api
from .client import ApiError, DigitalOceanClient, DigitalOceanError, is_error
from .config import ClientConfig, configure_logging, load_config
from .credentials import load_token
from .operations import ResourceOperation, make_operation
from .types import DropletActionType
from .urls import DEFAULT_ENDPOINT, build_url

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ENDPOINT",
    "ApiError",
    "ClientConfig",
    "DigitalOcean",
    "DigitalOceanClient",
    "DigitalOceanError",
    "DropletActionType",
    "ResourceOperation",
    "build_url",
    "configure_logging",
    "create_api",
    "is_error",
    "load_config",
    "load_token",
    "make_operation",
]
