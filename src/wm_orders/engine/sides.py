from collections.abc import Iterable

from src.wm_common.enums import OrderType
from src.wm_orders.domain.models import Order


def split_sides(orders: Iterable[Order]) -> tuple[list[Order], list[Order]]:
    """Partition into (sells, buys), each ranked best-first.

    sells: ascending platinum (cheapest ask - what a buyer actually pays)
    buys:  descending platinum (highest bid - what a seller actually gets)
    sorted() is stable, so equal prices keep upstream order.
    """
    orders = list(orders)
    sells = sorted(
        (o for o in orders if o.order_type is OrderType.SELL),
        key=lambda o: o.platinum,
    )
    buys = sorted(
        (o for o in orders if o.order_type is OrderType.BUY),
        key=lambda o: o.platinum,
        reverse=True,
    )
    return sells, buys


def best_quote(ranked: list[Order]) -> Order | None:
    return ranked[0] if ranked else None
