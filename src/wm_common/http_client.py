"""Shared httpx client factory for upstream calls.

One connection pool per process; created on first use, closed on shutdown.
"""

import httpx

from config.settings import settings

_http_client: httpx.AsyncClient | None = None


async def get_http_client() -> httpx.AsyncClient:
    """Get or create the upstream connection pool."""
    global _http_client  # noqa: PLW0603
    if _http_client is None:
        _http_client = httpx.AsyncClient(
            base_url=settings.WFM_BASE_URL,
            timeout=settings.WFM_TIMEOUT_SECONDS,
        )
    return _http_client


async def close_http_client() -> None:
    """Close the upstream connection pool."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
