"""Shared types for DigitalOcean API results.

Responses are not validated against a schema: callers receive whatever JSON
the API returns. Transport failures are reported as an error result, a
single-key mapping holding the underlying httpx request exception.
"""

import enum
from collections.abc import Mapping
from typing import Any, TypeAlias

import httpx

JSONValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None
ErrorResult: TypeAlias = dict[str, httpx.RequestError]
Result: TypeAlias = JSONValue | ErrorResult
Params: TypeAlias = Mapping[str, Any]


class DropletActionType(str, enum.Enum):
    """Action types accepted by ``POST droplets/<id>/actions``."""

    REBOOT = "reboot"
    POWER_CYCLE = "power_cycle"
    SHUTDOWN = "shutdown"
    POWER_OFF = "power_off"
    POWER_ON = "power_on"
    PASSWORD_RESET = "password_reset"
