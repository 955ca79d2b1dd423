"""Midpoint Estimator - median of the top-k quotes on one side.

The median of a shallow window resists a single mispriced listing better
than the best quote or a full-book mean, while only looking at orders a
trader would realistically reach.
"""

from src.wm_orders.domain.models import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH, Order


def clamp(value: int | None, low: int, high: int, default: int) -> int:
    """Clamp to [low, high]; None / 0 fall back to default."""
    if not value:
        return default
    return max(low, min(high, int(value)))


def clamp_depth(depth: int | None) -> int:
    return clamp(depth, MIN_DEPTH, MAX_DEPTH, DEFAULT_DEPTH)


def median(values: list[int]) -> float | None:
    if not values:
        return None
    ordered = sorted(values)
    m = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[m]
    return (ordered[m - 1] + ordered[m]) / 2


def top_k_midpoint(ranked: list[Order], k: int) -> float | None:
    """Median of the first k prices of a best-first ranked side.

    The window is re-sorted ascending inside median(): for the buy side the
    ranking order is descending, so the window alone is not median-ready.
    """
    window = [o.platinum for o in ranked[: min(k, len(ranked))]]
    return median(window)
