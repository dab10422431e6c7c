"""Generic resource operations.

A ``ResourceOperation`` binds an HTTP method and a resource name to a
client. It exposes the collection-level ``list`` call and the
identifier-level ``by_id`` call, which together cover the plain REST
verbs of most API resources.
"""

from typing import Any

from .client import DigitalOceanClient
from .types import Params, Result

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


class ResourceOperation:
    """A REST operation with a fixed method against a single resource."""

    def __init__(self, client: DigitalOceanClient, method: str, resource: str):
        method = method.upper()
        if method not in HTTP_METHODS:
            msg = f"Unsupported HTTP method: {method}"
            raise ValueError(msg)
        self._client = client
        self.method = method
        self.resource = resource

    def __repr__(self) -> str:
        return f"ResourceOperation({self.method} {self.resource})"

    def _request(self, token: str, parts: tuple[Any, ...], params: Params) -> Result:
        return self._client.call(
            self.method,
            self.resource,
            token,
            *parts,
            params=params,
        )

    def list(self, token: str) -> Result:
        """Call the collection URL, e.g. ``GET droplets/``, without a body."""
        return self._request(token, (), {})

    def by_id(
        self,
        token: str,
        identifier: Any,
        params: Params | None = None,
        **kwargs: Any,
    ) -> Result:
        """Call the URL of a single object, e.g. ``DELETE droplets/123``.

        ``params`` and keyword arguments are merged into one mapping and
        sent as the JSON body if non-empty.
        """
        return self._request(token, (identifier,), {**(params or {}), **kwargs})

    def create(self, token: str, params: Params | None = None, **kwargs: Any) -> Result:
        """Call the collection URL with a JSON body, e.g. ``POST droplets/``."""
        return self._request(token, (), {**(params or {}), **kwargs})


def make_operation(
    client: DigitalOceanClient,
    method: str,
    resource: str,
) -> ResourceOperation:
    """Create an operation for ``method`` on ``resource`` bound to ``client``."""
    return ResourceOperation(client, method, resource)
