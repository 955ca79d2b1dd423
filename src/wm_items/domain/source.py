# src/wm_items/domain/source.py
"""Catalog source Protocol - implemented by WarframeMarketClient."""

from typing import Any, Protocol


class CatalogSourceProtocol(Protocol):
    async def fetch_items(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[dict[str, Any]]: ...

    async def fetch_item(
        self,
        url_name: str,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any: ...

    async def fetch_dropsources(
        self,
        url_name: str,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> Any: ...
