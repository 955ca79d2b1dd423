"""Warframe.Market HTTP client - the Remote Order Source.

Thin wrapper over the shared httpx pool. Forwards Language / Platform /
Authorization headers, drops empty query params, and turns every failure into
an AppError carrying method + URL (+ status) so callers can diagnose it.
No retries and no caching: one best-effort call per invocation.

Endpoints used:
  GET /items                          - item catalog
  GET /items/{url_name}               - item metadata
  GET /items/{url_name}/orders        - all listed orders (?include=item)
  GET /items/{url_name}/dropsources   - drop locations (?include=item)
  GET /riven/items                    - riven-capable weapons
  GET /riven/attributes               - riven stat slugs
  GET /auctions/search?type=riven     - riven auction search
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from config.settings import settings
from src.wm_common.errors import (
    UpstreamPayloadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from src.wm_common.http_client import get_http_client

logger = logging.getLogger(__name__)


def build_headers(
    language: str | None = None,
    platform: str | None = None,
    auth: str | None = None,
) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "Language": language or settings.WFM_LANGUAGE,
        "Platform": platform or settings.WFM_PLATFORM,
    }
    token = auth or settings.WFM_JWT
    if token:
        headers["Authorization"] = f"JWT {token}"
    return headers


def clean_params(query: dict[str, Any] | None) -> dict[str, str]:
    """Drop None / "" values; stringify the rest."""
    if not query:
        return {}
    return {k: str(v) for k, v in query.items() if v is not None and v != ""}


def _payload(data: Any) -> dict[str, Any]:
    if isinstance(data, dict) and isinstance(data.get("payload"), dict):
        return data["payload"]
    return {}


def _payload_or_body(data: Any, key: str) -> Any:
    value = _payload(data).get(key)
    return data if value is None else value


class WarframeMarketClient:
    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        # None → use the process-wide pool from wm_common.http_client
        self._http = http_client

    async def _client(self) -> httpx.AsyncClient:
        if self._http is not None:
            return self._http
        return await get_http_client()

    async def get_json(
        self,
        path: str,
        *,
        language: str | None = None,
        platform: str | None = None,
        query: dict[str, Any] | None = None,
        auth: str | None = None,
    ) -> Any:
        client = await self._client()
        request = client.build_request(
            "GET",
            path,
            headers=build_headers(language, platform, auth),
            params=clean_params(query),
        )
        url = str(request.url)
        logger.debug("WFM GET %s", url)

        try:
            response = await client.send(request)
        except httpx.HTTPError as exc:
            logger.warning("WFM GET %s transport failure: %r", url, exc)
            raise UpstreamTransportError("GET", url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            logger.warning("WFM GET %s -> %d", url, response.status_code)
            raise UpstreamStatusError(
                "GET", url, response.status_code, response.reason_phrase, response.text
            )

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamPayloadError("GET", url) from exc

    async def fetch_orders(
        self,
        url_name: str,
        platform: str | None = None,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> list[dict[str, Any]]:
        data = await self.get_json(
            f"/items/{quote(url_name, safe='')}/orders",
            platform=platform,
            language=language,
            query={"include": "item"} if include_item else None,
            auth=auth,
        )
        orders = _payload(data).get("orders")
        return orders if isinstance(orders, list) else []

    async def fetch_items(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[dict[str, Any]]:
        data = await self.get_json("/items", language=language, auth=auth)
        items = _payload(data).get("items")
        return items if isinstance(items, list) else []

    async def fetch_item(
        self,
        url_name: str,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any:
        data = await self.get_json(
            f"/items/{quote(url_name, safe='')}", language=language, auth=auth
        )
        # Prefer the normalized payload; otherwise hand back the raw body.
        return _payload(data).get("item") or data

    async def fetch_dropsources(
        self,
        url_name: str,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> Any:
        data = await self.get_json(
            f"/items/{quote(url_name, safe='')}/dropsources",
            language=language,
            query={"include": "item"} if include_item else None,
            auth=auth,
        )
        return _payload_or_body(data, "dropsources")

    async def fetch_riven_items(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any:
        data = await self.get_json("/riven/items", language=language, auth=auth)
        return _payload_or_body(data, "items")

    async def fetch_riven_attributes(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any:
        data = await self.get_json("/riven/attributes", language=language, auth=auth)
        return _payload_or_body(data, "attributes")

    async def search_riven_auctions(
        self,
        query: dict[str, Any],
        platform: str | None = None,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[dict[str, Any]]:
        data = await self.get_json(
            "/auctions/search",
            platform=platform,
            language=language,
            query={"type": "riven", **query},
            auth=auth,
        )
        auctions = _payload(data).get("auctions")
        return auctions if isinstance(auctions, list) else []
