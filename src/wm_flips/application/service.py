"""FlipsApplicationService - summarize many items and rank them by spread.

Targets come from an explicit url_names list, or from a catalog search when
the list is empty. Per-item fetches run concurrently under a semaphore
(settings.FLIPS_MAX_CONCURRENCY) to stay polite with the upstream API.
A per-item failure becomes an error row; it never aborts the batch.
Output order is the ranked order, never fetch-completion order.
"""

import asyncio
import logging

from config.settings import settings
from src.wm_common.errors import AppError, NoFlipTargetsError
from src.wm_flips.application.schemas import FlipRow, FlipsResponse
from src.wm_flips.domain.models import FlipCandidate
from src.wm_flips.engine.ranker import rank_candidates
from src.wm_items.application.service import ItemsApplicationService
from src.wm_orders.application.service import OrdersApplicationService
from src.wm_orders.domain.models import FilterCriteria
from src.wm_orders.engine.midpoint import clamp

logger = logging.getLogger(__name__)

DEFAULT_FLIPS_SEARCH_LIMIT = 10
MAX_FLIPS_SEARCH_LIMIT = 50


class FlipsApplicationService:
    def __init__(
        self,
        orders: OrdersApplicationService | None = None,
        items: ItemsApplicationService | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self._orders = orders or OrdersApplicationService()
        self._items = items or ItemsApplicationService()
        self._max_concurrency = max(1, max_concurrency or settings.FLIPS_MAX_CONCURRENCY)

    async def resolve_targets(
        self,
        url_names: list[str] | None,
        query: str | None,
        limit_search: int | None,
        *,
        language: str | None = None,
        auth: str | None = None,
    ) -> list[str]:
        if url_names:
            return list(url_names)
        if query:
            cap = clamp(limit_search, 1, MAX_FLIPS_SEARCH_LIMIT, DEFAULT_FLIPS_SEARCH_LIMIT)
            found = await self._items.find(str(query), cap, language=language, auth=auth)
            if found:
                return [it.url_name for it in found]
        raise NoFlipTargetsError()

    async def _evaluate(
        self,
        url_name: str,
        criteria: FilterCriteria,
        depth: int | None,
        platform: str | None,
        language: str | None,
        auth: str | None,
    ) -> FlipCandidate:
        try:
            summary = await self._orders.summarize(
                url_name, criteria, depth,
                platform=platform, language=language, auth=auth,
            )
        except AppError as exc:
            logger.warning("Flip candidate %s failed: %s", url_name, exc.message)
            return FlipCandidate(url_name=url_name, error=exc.message)
        except Exception as exc:
            logger.exception("Flip candidate %s failed unexpectedly", url_name)
            return FlipCandidate(url_name=url_name, error=str(exc) or type(exc).__name__)
        return FlipCandidate(url_name=url_name, summary=summary)

    async def rank_flips(
        self,
        url_names: list[str] | None,
        query: str | None,
        criteria: FilterCriteria,
        depth: int | None = 3,
        min_spread_pct: float = 0.0,
        limit_search: int | None = DEFAULT_FLIPS_SEARCH_LIMIT,
        *,
        platform: str | None = None,
        language: str | None = None,
        auth: str | None = None,
    ) -> FlipsResponse:
        targets = await self.resolve_targets(
            url_names, query, limit_search, language=language, auth=auth
        )
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(slug: str) -> FlipCandidate:
            async with semaphore:
                return await self._evaluate(slug, criteria, depth, platform, language, auth)

        candidates = await asyncio.gather(*(bounded(slug) for slug in targets))
        ranked = rank_candidates(candidates, min_spread_pct)
        logger.info(
            "Ranked flips: %d targets → %d rows (%d failed)",
            len(targets), len(ranked), sum(1 for c in ranked if c.failed),
        )
        rows = [FlipRow.from_domain(c) for c in ranked]
        return FlipsResponse(count=len(rows), results=rows)
