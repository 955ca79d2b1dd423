"""Pydantic schemas for wm_orders API responses.

Absent values are serialized as null and are never collapsed to 0:
    midpoints.buy = null  → no eligible bids
    spread.pct    = null  → no eligible asks (or a zero sell midpoint)
"""

from typing import Any

from pydantic import BaseModel

from src.wm_orders.domain.models import BestQuote, FilterCriteria, OrderSummary

# ---------------------------------------------------------------------------
# Summary pieces
# ---------------------------------------------------------------------------


class QuoteOut(BaseModel):
    platinum: int
    quantity: int
    user: str | None
    region: str | None
    last_update: str | None
    platform: str | None
    subtype: str | None
    status: str | None
    reputation: int | None

    @classmethod
    def from_domain(cls, q: BestQuote | None) -> "QuoteOut | None":
        if q is None:
            return None
        return cls(
            platinum=q.platinum,
            quantity=q.quantity,
            user=q.user,
            region=q.region,
            last_update=q.last_update,
            platform=q.platform,
            subtype=q.subtype,
            status=q.status,
            reputation=q.reputation,
        )


class MidpointsOut(BaseModel):
    sell: float | None
    buy: float | None


class SpreadOut(BaseModel):
    absolute: float
    pct: float | None


class TotalsOut(BaseModel):
    sells: int
    buys: int


class FiltersOut(BaseModel):
    status: str
    min_reputation: int | None
    region: str | None
    depth: int

    @classmethod
    def from_criteria(cls, criteria: FilterCriteria, depth: int) -> "FiltersOut":
        return cls(
            status=criteria.status_floor.value,
            min_reputation=criteria.min_reputation,
            region=criteria.region,
            depth=depth,
        )


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class OrdersSummaryResponse(BaseModel):
    best_sell: QuoteOut | None
    best_buy: QuoteOut | None
    midpoints: MidpointsOut
    spread: SpreadOut
    totals: TotalsOut
    filters: FiltersOut

    @classmethod
    def from_domain(cls, s: OrderSummary) -> "OrdersSummaryResponse":
        return cls(
            best_sell=QuoteOut.from_domain(s.best_sell),
            best_buy=QuoteOut.from_domain(s.best_buy),
            midpoints=MidpointsOut(sell=s.mid_sell, buy=s.mid_buy),
            spread=SpreadOut(absolute=s.spread_abs, pct=s.spread_pct),
            totals=TotalsOut(sells=s.total_sells, buys=s.total_buys),
            filters=FiltersOut.from_criteria(s.criteria, s.depth),
        )


class RawOrdersResponse(BaseModel):
    """summarize=false: filtered upstream orders, untouched."""

    orders: list[dict[str, Any]]


class PriceSnapshotResponse(BaseModel):
    url_name: str
    platform: str
    summary: OrdersSummaryResponse
