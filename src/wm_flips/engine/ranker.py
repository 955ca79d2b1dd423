"""Multi-item flip ranking - threshold filter + sort by spread percent.

Failed items are kept regardless of threshold so the caller can see which
fetches failed; they sort after every numeric row.
"""

from collections.abc import Iterable

from src.wm_flips.domain.models import FlipCandidate

NO_SPREAD_SORT_KEY: float = float("-inf")


def passes_threshold(candidate: FlipCandidate, min_spread_pct: float) -> bool:
    if candidate.failed:
        return True
    pct = candidate.spread_pct
    return pct is not None and pct >= min_spread_pct


def sort_key(candidate: FlipCandidate) -> float:
    pct = candidate.spread_pct
    return pct if pct is not None else NO_SPREAD_SORT_KEY


def rank_candidates(
    candidates: Iterable[FlipCandidate],
    min_spread_pct: float = 0.0,
) -> list[FlipCandidate]:
    kept = [c for c in candidates if passes_threshold(c, min_spread_pct)]
    # Stable: equal keys (e.g. several failures) keep input order.
    return sorted(kept, key=sort_key, reverse=True)
