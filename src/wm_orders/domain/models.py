"""Domain models for wm_orders - frozen dataclasses, no I/O.

Orders are immutable snapshots of one upstream listing: the engine only
filters and reorders references to them, never mutates.
"""

from dataclasses import dataclass, field
from typing import Any

from src.wm_common.enums import OrderType, SellerStatus, StatusFloor

# Upstream omits `visible` on most listings; absence means listed.
DEFAULT_VISIBLE: bool = True
# Missing reputation loses every min_reputation comparison.
MISSING_REPUTATION: float = float("-inf")

DEFAULT_DEPTH: int = 5
MIN_DEPTH: int = 1
MAX_DEPTH: int = 10


@dataclass(frozen=True)
class Seller:
    ingame_name: str | None = None
    name: str | None = None  # alternate identifier, used when ingame_name is absent
    status: SellerStatus | None = None
    reputation: int | None = None
    region: str | None = None

    @property
    def display_name(self) -> str | None:
        return self.ingame_name or self.name

    @property
    def reputation_for_threshold(self) -> float:
        return self.reputation if self.reputation is not None else MISSING_REPUTATION


@dataclass(frozen=True)
class Order:
    id: str | None
    order_type: OrderType | None  # None when upstream sends an unknown type
    platinum: int
    quantity: int
    visible: bool = DEFAULT_VISIBLE
    last_update: str | None = None
    platform: str | None = None
    subtype: str | None = None  # item rank / variant
    region: str | None = None
    seller: Seller = field(default_factory=Seller)
    # Upstream dict as received; echoed back by raw (summarize=false) mode.
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)


@dataclass(frozen=True)
class FilterCriteria:
    status_floor: StatusFloor = StatusFloor.ANY
    min_reputation: int | None = None
    region: str | None = None


@dataclass(frozen=True)
class BestQuote:
    """Compact projection of the head order on one side."""

    platinum: int
    quantity: int
    user: str | None
    region: str | None
    last_update: str | None
    platform: str | None
    subtype: str | None
    status: str | None
    reputation: int | None


@dataclass(frozen=True)
class OrderSummary:
    best_sell: BestQuote | None
    best_buy: BestQuote | None
    mid_sell: float | None
    mid_buy: float | None
    spread_abs: float
    spread_pct: float | None  # None, never 0, when it cannot be computed
    total_sells: int
    total_buys: int
    criteria: FilterCriteria
    depth: int
