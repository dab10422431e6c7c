"""DigitalOcean REST API client.

Provides the synchronous request executor shared by every API operation:
bearer-token authentication, optional JSON bodies, thread-local httpx
clients and a uniform ``(method, resource, *parts)`` request builder.
"""

import json
import threading
import time
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from .config import ClientConfig
from .types import Params, Result
from .urls import build_url

logger = structlog.get_logger(__name__)


class DigitalOceanError(Exception):
    """Base class for errors raised by the DigitalOcean client."""


class ApiError(DigitalOceanError):
    """Raised when the API response cannot be returned as plain JSON.

    Either the body is not valid JSON, or the client is configured with
    ``raise_for_status`` and the API answered with a non-2xx status.
    """

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def is_error(result: Result) -> bool:
    """Return True if ``result`` is an error result from a transport failure.

    Remote-reported errors (non-2xx responses) are ordinary JSON and are not
    detected here; inspect the payload (e.g. its ``id`` and ``message`` keys).
    """
    return (
        isinstance(result, dict)
        and len(result) == 1
        and isinstance(result.get("error"), httpx.RequestError)
    )


class DigitalOceanClient:
    """HTTP client for the DigitalOcean v2 API.

    The API token is passed on every call rather than stored on the client,
    so one client can serve several accounts.

    Thread-safe through thread-local storage of httpx.Client instances.
    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            config: Client configuration (defaults to ``ClientConfig()``).
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        self.config = config or ClientConfig()
        self._transport = transport

        # Use thread-local storage for httpx.Client (thread safety)
        self._local = threading.local()

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def client(self) -> httpx.Client:
        """Get or create thread-local httpx client.

        Each thread gets its own httpx.Client instance for thread safety.
        Clients are created lazily and reused within the same thread.

        Returns:
            Thread-local httpx.Client instance.
        """
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            self._local.client = httpx.Client(
                timeout=self.config.timeout,
                transport=self._transport,
            )
        return self._local.client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the thread-local HTTP client if open."""
        if hasattr(self._local, "client") and not self._local.client.is_closed:
            self._local.client.close()

    def url(self, resource: str, *parts: Any) -> str:
        """Build a resource URL against the configured endpoint."""
        return build_url(self.endpoint, resource, *parts)

    def execute(
        self,
        method: str,
        url: str,
        token: str,
        params: Mapping[str, Any] | None = None,
    ) -> Result:
        """Make an HTTP request to the DigitalOcean API.

        A JSON body is attached only when ``params`` is non-empty. The HTTP
        status is not interpreted unless ``raise_for_status`` is configured:
        error statuses come back as the parsed JSON error payload.

        Args:
            method: HTTP method (e.g. "GET", "POST").
            url: Fully qualified resource URL.
            token: API bearer token.
            params: Optional parameters, sent as the JSON request body.

        Returns:
            Parsed JSON response, None for an empty body, or
            ``{"error": exc}`` if the transport failed.

        Raises:
            ApiError: If the body is not valid JSON, or the status is
                non-2xx and ``raise_for_status`` is enabled.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        content = json.dumps(dict(params)) if params else None
        start_time = time.time()

        try:
            logger.debug(
                "Making API request",
                method=method,
                url=url,
                has_body=content is not None,
            )
            response = self.client.request(
                method,
                url,
                headers=headers,
                content=content,
            )
        except httpx.RequestError as exc:
            duration = time.time() - start_time
            logger.exception(
                "API request failed",
                method=method,
                url=url,
                duration_seconds=round(duration, 3),
            )
            return {"error": exc}

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        data = self._parse_body(response)
        if response.is_error:
            logger.warning(
                "API returned error status",
                method=method,
                url=url,
                status_code=response.status_code,
            )
            if self.config.raise_for_status:
                msg = f"API returned status {response.status_code} for {method} {url}"
                raise ApiError(msg, status_code=response.status_code, body=data)
        return data

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            msg = f"API returned a non-JSON body (status {response.status_code})"
            raise ApiError(
                msg,
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def call(
        self,
        method: str,
        resource: str,
        token: str,
        *parts: Any,
        params: Params | None = None,
    ) -> Result:
        """Build the URL for ``resource``/``parts`` and execute the request.

        Every API operation, including nested sub-resources such as
        ``domains/<name>/records``, is expressed through this method.
        """
        return self.execute(method, self.url(resource, *parts), token, params)
