"""Shared test fixtures.

`upstream` swaps the process-wide httpx pool for one backed by
httpx.MockTransport, so the real routers → services → WarframeMarketClient
path runs end to end without network access.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from config.settings import settings
from src.main import app
from src.wm_common import http_client

Route = tuple[int, Any] | Callable[[httpx.Request], httpx.Response]


@dataclass
class FakeUpstream:
    """Routes keyed by path relative to WFM_BASE_URL, e.g. '/items/x/orders'."""

    routes: dict[str, Route] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        base_path = httpx.URL(settings.WFM_BASE_URL).path.rstrip("/")
        route = self.routes.get(request.url.path.removeprefix(base_path))
        if route is None:
            return httpx.Response(404, text="no such route")
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, json=body)


@pytest.fixture
async def upstream(monkeypatch: pytest.MonkeyPatch) -> FakeUpstream:
    fake = FakeUpstream()
    mock = httpx.AsyncClient(
        transport=httpx.MockTransport(fake.handle),
        base_url=settings.WFM_BASE_URL,
    )
    monkeypatch.setattr(http_client, "_http_client", mock)
    yield fake
    await mock.aclose()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
