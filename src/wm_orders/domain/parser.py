"""Upstream order dict → Order.

All defaulting of loosely-typed upstream fields happens here, so the engine
can trust Order attributes without re-checking them.

Upstream shape (GET /items/{url_name}/orders → payload.orders[]):
    {"id": "...", "order_type": "sell", "platinum": 45, "quantity": 2,
     "visible": true, "region": "en", "platform": "pc", "subtype": "intact",
     "last_update": "2026-...", "user": {"ingame_name": "...", "status":
     "ingame", "reputation": 12, "region": "en"}}
"""

import logging
from typing import Any

from src.wm_common.enums import OrderType, SellerStatus
from src.wm_orders.domain.models import DEFAULT_VISIBLE, Order, Seller

logger = logging.getLogger(__name__)


def _opt_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _opt_int(value: Any) -> int | None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def parse_order_type(value: Any) -> OrderType | None:
    try:
        return OrderType(value)
    except ValueError:
        return None


def parse_seller_status(value: Any) -> SellerStatus | None:
    if not value:
        return None
    try:
        return SellerStatus(value)
    except ValueError:
        return SellerStatus.UNKNOWN


def parse_seller(raw: Any) -> Seller:
    if not isinstance(raw, dict):
        return Seller()
    return Seller(
        ingame_name=_opt_str(raw.get("ingame_name")),
        name=_opt_str(raw.get("name")),
        status=parse_seller_status(raw.get("status")),
        reputation=_opt_int(raw.get("reputation")),
        region=_opt_str(raw.get("region")),
    )


def parse_price(value: Any) -> int | None:
    """Non-negative whole platinum, or None when the price is unusable."""
    price = _opt_int(value)
    if price is None or price < 0:
        return None
    return price


def parse_order(raw: dict[str, Any]) -> Order:
    """Raises ValueError when the order carries no usable price."""
    platinum = parse_price(raw.get("platinum"))
    if platinum is None:
        raise ValueError(f"order {raw.get('id')!r} has no valid platinum price")
    visible = raw.get("visible")
    return Order(
        id=_opt_str(raw.get("id")),
        order_type=parse_order_type(raw.get("order_type")),
        platinum=platinum,
        quantity=_opt_int(raw.get("quantity")) or 0,
        visible=DEFAULT_VISIBLE if visible is None else visible is not False,
        last_update=_opt_str(raw.get("last_update")),
        platform=_opt_str(raw.get("platform")),
        subtype=_opt_str(raw.get("subtype")),
        region=_opt_str(raw.get("region")),
        seller=parse_seller(raw.get("user")),
        raw=raw,
    )


def parse_orders(raw_orders: list[Any]) -> list[Order]:
    """Parse upstream orders, skipping non-objects and orders without a valid price."""
    orders: list[Order] = []
    for raw in raw_orders:
        if not isinstance(raw, dict):
            continue
        try:
            orders.append(parse_order(raw))
        except ValueError as exc:
            logger.debug("Skipping order: %s", exc)
    return orders
