"""ItemsApplicationService - catalog search + item lookup (read-only)."""

from typing import Any

from src.wm_common.errors import MissingItemIdError, MissingQueryError
from src.wm_items.application.schemas import ItemOut, SearchItemsResponse
from src.wm_items.domain.models import CatalogItem
from src.wm_items.domain.search import parse_catalog, search_catalog
from src.wm_items.domain.source import CatalogSourceProtocol
from src.wm_orders.engine.midpoint import clamp
from src.wm_upstream.client import WarframeMarketClient

DEFAULT_SEARCH_LIMIT = 10
MAX_SEARCH_LIMIT = 100


class ItemsApplicationService:
    def __init__(self, source: CatalogSourceProtocol | None = None) -> None:
        self._source: CatalogSourceProtocol = source or WarframeMarketClient()

    async def find(
        self,
        query: str,
        limit: int,
        *,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[CatalogItem]:
        """Fetch the catalog and return up to `limit` matches (limit already clamped)."""
        raw = await self._source.fetch_items(language=language, auth=auth)
        return search_catalog(parse_catalog(raw), query, limit)

    async def search_items(
        self,
        query: str,
        limit: int | None = None,
        *,
        language: str | None = None,
        auth: str | None = None,
    ) -> SearchItemsResponse:
        if not query or not isinstance(query, str):
            raise MissingQueryError()
        cap = clamp(limit, 1, MAX_SEARCH_LIMIT, DEFAULT_SEARCH_LIMIT)
        found = await self.find(query, cap, language=language, auth=auth)
        return SearchItemsResponse(
            query=query,
            count=len(found),
            items=[ItemOut.from_domain(it) for it in found],
        )

    async def get_item(
        self,
        url_name: str,
        *,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any:
        if not url_name or not isinstance(url_name, str):
            raise MissingItemIdError()
        return await self._source.fetch_item(url_name, language=language, auth=auth)

    async def get_dropsources(
        self,
        url_name: str,
        *,
        include_item: bool = False,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any:
        if not url_name or not isinstance(url_name, str):
            raise MissingItemIdError()
        return await self._source.fetch_dropsources(
            url_name, language=language, include_item=include_item, auth=auth
        )
