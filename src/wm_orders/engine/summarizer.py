"""Snapshot Summarizer - filter → rank → best quotes + midpoints + spread."""

from collections.abc import Iterable

from src.wm_orders.domain.models import BestQuote, FilterCriteria, Order, OrderSummary
from src.wm_orders.engine.filters import filter_orders
from src.wm_orders.engine.midpoint import clamp_depth, top_k_midpoint
from src.wm_orders.engine.sides import best_quote, split_sides


def project_quote(order: Order | None) -> BestQuote | None:
    if order is None:
        return None
    seller = order.seller
    return BestQuote(
        platinum=order.platinum,
        quantity=order.quantity,
        user=seller.display_name,
        region=order.region,
        last_update=order.last_update,
        platform=order.platform,
        subtype=order.subtype,
        status=seller.status.value if seller.status is not None else None,
        reputation=seller.reputation,
    )


def compute_spread(mid_sell: float | None, mid_buy: float | None) -> tuple[float, float | None]:
    """Return (spread_abs, spread_pct).

    An absent midpoint counts as 0 in spread_abs only, so a book with bids and
    no asks reports spread_abs == mid_buy. spread_pct is None whenever
    mid_sell is absent or zero.
    """
    spread_abs = (mid_buy or 0) - (mid_sell or 0)
    spread_pct = spread_abs / mid_sell if mid_sell else None
    return spread_abs, spread_pct


def summarize_orders(
    orders: Iterable[Order],
    criteria: FilterCriteria,
    depth: int | None = None,
) -> OrderSummary:
    k = clamp_depth(depth)
    sells, buys = split_sides(filter_orders(orders, criteria))

    mid_sell = top_k_midpoint(sells, k)
    mid_buy = top_k_midpoint(buys, k)
    spread_abs, spread_pct = compute_spread(mid_sell, mid_buy)

    return OrderSummary(
        best_sell=project_quote(best_quote(sells)),
        best_buy=project_quote(best_quote(buys)),
        mid_sell=mid_sell,
        mid_buy=mid_buy,
        spread_abs=spread_abs,
        spread_pct=spread_pct,
        total_sells=len(sells),
        total_buys=len(buys),
        criteria=criteria,
        depth=k,
    )
