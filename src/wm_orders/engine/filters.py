"""Order Filter - execution-realism predicates over one item's orders.

An order survives when it is visible AND passes every predicate that the
criteria switch on. An empty result means "no liquidity matches", not an error.
"""

from collections.abc import Iterable

from src.wm_common.enums import SellerStatus, StatusFloor
from src.wm_orders.domain.models import FilterCriteria, Order

_ONLINE_OR_BETTER: frozenset[SellerStatus] = frozenset(
    {SellerStatus.INGAME, SellerStatus.ONLINE}
)


def is_visible(order: Order) -> bool:
    return order.visible


def status_ok(order: Order, floor: StatusFloor) -> bool:
    """ANY passes everything; a missing status fails any stricter floor."""
    if floor is StatusFloor.ANY:
        return True
    status = order.seller.status
    if status is None:
        return False
    if floor is StatusFloor.INGAME:
        return status is SellerStatus.INGAME
    return status in _ONLINE_OR_BETTER


def reputation_ok(order: Order, min_reputation: int | None) -> bool:
    if min_reputation is None:
        return True
    return order.seller.reputation_for_threshold >= min_reputation


def region_ok(order: Order, region: str | None) -> bool:
    """Either the order's own region or the seller's region may match."""
    if not region:
        return True
    return order.region == region or order.seller.region == region


def filter_orders(orders: Iterable[Order], criteria: FilterCriteria) -> list[Order]:
    return [
        o
        for o in orders
        if is_visible(o)
        and status_ok(o, criteria.status_floor)
        and reputation_ok(o, criteria.min_reputation)
        and region_ok(o, criteria.region)
    ]
