# src/wm_rivens/domain/source.py
"""Riven source Protocol - implemented by WarframeMarketClient."""

from typing import Any, Protocol


class RivenSourceProtocol(Protocol):
    async def fetch_riven_items(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any: ...

    async def fetch_riven_attributes(
        self,
        language: str | None = None,
        auth: str | None = None,
    ) -> Any: ...

    async def search_riven_auctions(
        self,
        query: dict[str, Any],
        platform: str | None = None,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[dict[str, Any]]: ...
