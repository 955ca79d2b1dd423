"""RivensApplicationService - riven catalog lookups and auction search.

Items and attributes are passed through as upstream returns them; auction
search wraps the upstream list as {count, auctions}.
"""

import logging
from typing import Any

from src.wm_rivens.application.schemas import RivenAuctionsResponse
from src.wm_rivens.domain.models import RivenAuctionQuery
from src.wm_rivens.domain.source import RivenSourceProtocol
from src.wm_upstream.client import WarframeMarketClient

logger = logging.getLogger(__name__)


class RivensApplicationService:
    def __init__(self, source: RivenSourceProtocol | None = None) -> None:
        self._source: RivenSourceProtocol = source or WarframeMarketClient()

    async def list_items(
        self, *, language: str | None = None, auth: str | None = None
    ) -> Any:
        return await self._source.fetch_riven_items(language=language, auth=auth)

    async def list_attributes(
        self, *, language: str | None = None, auth: str | None = None
    ) -> Any:
        return await self._source.fetch_riven_attributes(language=language, auth=auth)

    async def search_auctions(
        self,
        query: RivenAuctionQuery,
        *,
        platform: str | None = None,
        language: str | None = None,
        auth: str | None = None,
    ) -> RivenAuctionsResponse:
        auctions = await self._source.search_riven_auctions(
            query.to_params(), platform=platform, language=language, auth=auth
        )
        logger.debug("Riven search %s: %d auctions", query.weapon_url_name, len(auctions))
        return RivenAuctionsResponse(count=len(auctions), auctions=auctions)
