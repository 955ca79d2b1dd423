"""OrdersApplicationService - fetch one item's orders and reduce them.

Upstream errors are NOT caught here: a failed fetch must surface as an
error, never as an empty "no liquidity" summary.
"""

import logging

from config.settings import settings
from src.wm_common.errors import MissingItemIdError
from src.wm_orders.application.schemas import (
    OrdersSummaryResponse,
    PriceSnapshotResponse,
    RawOrdersResponse,
)
from src.wm_orders.domain.models import FilterCriteria, OrderSummary
from src.wm_orders.domain.parser import parse_orders
from src.wm_orders.domain.source import OrderSourceProtocol
from src.wm_orders.engine.filters import filter_orders
from src.wm_orders.engine.summarizer import summarize_orders
from src.wm_upstream.client import WarframeMarketClient

logger = logging.getLogger(__name__)


def _require_url_name(url_name: object) -> str:
    if not url_name or not isinstance(url_name, str):
        raise MissingItemIdError()
    return url_name


class OrdersApplicationService:
    def __init__(self, source: OrderSourceProtocol | None = None) -> None:
        self._source: OrderSourceProtocol = source or WarframeMarketClient()

    async def summarize(
        self,
        url_name: str,
        criteria: FilterCriteria,
        depth: int | None = None,
        *,
        platform: str | None = None,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> OrderSummary:
        url_name = _require_url_name(url_name)
        raw = await self._source.fetch_orders(
            url_name,
            platform=platform,
            language=language,
            include_item=include_item,
            auth=auth,
        )
        summary = summarize_orders(parse_orders(raw), criteria, depth)
        logger.debug(
            "Summarized %s: %d raw → %d sells / %d buys",
            url_name, len(raw), summary.total_sells, summary.total_buys,
        )
        return summary

    async def get_orders(
        self,
        url_name: str,
        criteria: FilterCriteria,
        depth: int | None = None,
        *,
        summarize: bool = True,
        platform: str | None = None,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> OrdersSummaryResponse | RawOrdersResponse:
        if summarize:
            summary = await self.summarize(
                url_name, criteria, depth,
                platform=platform, language=language,
                include_item=include_item, auth=auth,
            )
            return OrdersSummaryResponse.from_domain(summary)

        url_name = _require_url_name(url_name)
        raw = await self._source.fetch_orders(
            url_name,
            platform=platform,
            language=language,
            include_item=include_item,
            auth=auth,
        )
        kept = filter_orders(parse_orders(raw), criteria)
        return RawOrdersResponse(orders=[o.raw for o in kept])

    async def price_snapshot(
        self,
        url_name: str,
        criteria: FilterCriteria,
        depth: int | None = None,
        *,
        platform: str | None = None,
        language: str | None = None,
        auth: str | None = None,
    ) -> PriceSnapshotResponse:
        summary = await self.summarize(
            url_name, criteria, depth,
            platform=platform, language=language, auth=auth,
        )
        return PriceSnapshotResponse(
            url_name=url_name,
            platform=platform or settings.WFM_PLATFORM,
            summary=OrdersSummaryResponse.from_domain(summary),
        )
