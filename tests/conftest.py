"""Shared fixtures: a DigitalOceanClient wired to an httpx.MockTransport."""

import httpx
import pytest
import structlog

from digitalocean_api import api, client, config


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any global structlog configuration made during a test."""
    yield
    structlog.reset_defaults()


class RecordingHandler:
    """MockTransport handler that records requests and replays a response.

    ``response`` is either an httpx.Response, copied for every request, or a
    zero-argument callable building one inside the transport.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"ok": True})
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if callable(self.response):
            return self.response()
        return httpx.Response(
            self.response.status_code,
            headers=self.response.headers,
            content=self.response.content,
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def do_client(handler: RecordingHandler) -> client.DigitalOceanClient:
    """Client with default configuration and a recording transport."""
    return client.DigitalOceanClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def strict_client(handler: RecordingHandler) -> client.DigitalOceanClient:
    """Client that raises ApiError on non-2xx responses."""
    return client.DigitalOceanClient(
        config.ClientConfig(raise_for_status=True),
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def do_api(do_client: client.DigitalOceanClient) -> api.DigitalOcean:
    return api.DigitalOcean(do_client)
