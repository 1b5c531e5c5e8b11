"""
Shared pytest fixtures for all tests.
Provides fixture loading, settings and a mocked registry transport.
"""
from collections.abc import Callable

import httpx
import pytest

from companies_house.config import Settings
from tests.fixtures import FixtureLoader


@pytest.fixture
def fixture_loader():
    """Provide fixture loader rooted at tests/fixtures/__files."""
    return FixtureLoader()


@pytest.fixture
def tmp_loader(tmp_path):
    """Provide a loader rooted at an empty temporary directory."""
    return FixtureLoader(tmp_path)


@pytest.fixture
def test_settings():
    """Settings with no retry delay and a dummy API key."""
    return Settings(
        companies_house_api_key="test-key",
        companies_house_api_url="https://registry.test",
        request_timeout=5.0,
        max_retries=3,
        retry_wait_seconds=0,
        max_parallel_tasks=2,
    )


@pytest.fixture
def make_http_client(test_settings) -> Callable[..., httpx.AsyncClient]:
    """
    Build an httpx.AsyncClient backed by a MockTransport.

    `routes` maps request paths to (status, body) pairs; a callable handler
    may be passed instead for anything more involved.
    """
    def _make(routes=None, handler=None) -> httpx.AsyncClient:
        def _route(request: httpx.Request) -> httpx.Response:
            if request.url.path not in routes:
                return httpx.Response(404, json={"errors": [{"error": "not-routed"}]})
            status, body = routes[request.url.path]
            return httpx.Response(
                status,
                content=body.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )

        return httpx.AsyncClient(
            base_url=test_settings.companies_house_api_url,
            auth=test_settings.get_auth(),
            transport=httpx.MockTransport(handler or _route),
        )

    return _make
