"""Domain models for wm_flips - pure dataclasses, no business logic."""

from dataclasses import dataclass

from src.wm_orders.domain.models import OrderSummary


@dataclass(frozen=True)
class FlipCandidate:
    """One item's outcome in a flip ranking: a summary XOR a captured error."""

    url_name: str
    summary: OrderSummary | None = None
    error: str | None = None

    @property
    def spread_pct(self) -> float | None:
        return self.summary.spread_pct if self.summary is not None else None

    @property
    def failed(self) -> bool:
        return self.error is not None
