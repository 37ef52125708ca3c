"""
Shared pytest fixtures.

The staffing backend is replaced by FakeBackend, served to the real httpx
client through httpx.MockTransport, so the full request path (URLs, headers,
JSON decoding) is exercised without a network.
"""

import asyncio
import logging
import os
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio

from shared.clients.ats.rest.ATSClientRest import ATSClientRest
from shared.helper.HelperConfig import HelperConfig

BASE_URL = "http://backend.test"


class FakeBackend:
    """Answers backend requests from a path -> canned response table and records every request."""

    def __init__(self) -> None:
        self._routes: dict[str, tuple[int, object] | Exception] = {}
        self.requests: list[httpx.Request] = []

    def set_json(self, path: str, body: object, status_code: int = 200) -> None:
        self._routes[path] = (status_code, body)

    def set_raw(self, path: str, content: bytes, status_code: int = 200) -> None:
        self._routes[path] = (status_code, content)

    def set_error(self, path: str, exc: Exception) -> None:
        self._routes[path] = exc

    def requested_paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcome = self._routes.get(request.url.path)
        if outcome is None:
            return httpx.Response(404, json={"message": "Not found"})
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test against an environment that only knows the fake backend."""
    with patch.dict(os.environ, {"API_BASE_URL": BASE_URL}, clear=True):
        yield


@pytest.fixture
def helper_config() -> HelperConfig:
    return HelperConfig(logger=logging.getLogger("ats_search_bridge.tests"))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest_asyncio.fixture
async def ats_client(helper_config, backend):
    client = ATSClientRest(helper_config=helper_config)
    await client.boot(transport=httpx.MockTransport(backend.handler))
    yield client
    await client.close()


@pytest.fixture
def sync_ats_client(helper_config, backend):
    """ATS client for TestClient based tests, which run the app in their own event loop."""
    client = ATSClientRest(helper_config=helper_config)
    asyncio.run(client.boot(transport=httpx.MockTransport(backend.handler)))
    yield client
    asyncio.run(client.close())
