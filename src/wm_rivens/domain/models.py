"""Domain models for wm_rivens - frozen dataclasses, no I/O."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.wm_common.enums import BuyoutPolicy, Polarity, RivenSort

AUCTION_TYPE = "riven"


def _csv(stats: Sequence[str] | str | None) -> str | None:
    # upstream takes stat lists as one comma-separated value
    if stats is None or isinstance(stats, str):
        return stats
    return ",".join(stats)


@dataclass(frozen=True)
class RivenAuctionQuery:
    weapon_url_name: str | None = None
    positive_stats: Sequence[str] | str | None = None
    negative_stats: Sequence[str] | str | None = None  # ["None"] = no negative stat
    min_rank: int | None = None
    max_rank: int | None = None
    re_rolls_min: int | None = None
    re_rolls_max: int | None = None
    mastery_rank_min: int | None = None
    mastery_rank_max: int | None = None
    polarity: Polarity | None = None
    sort_by: RivenSort | None = None
    buyout_policy: BuyoutPolicy | None = None

    def to_params(self) -> dict[str, Any]:
        """Upstream query params. `type` is added by the client."""
        params: dict[str, Any] = {
            "weapon_url_name": self.weapon_url_name,
            "positive_stats": _csv(self.positive_stats),
            "negative_stats": _csv(self.negative_stats),
            "min_rank": self.min_rank,
            "max_rank": self.max_rank,
            "re_rolls_min": self.re_rolls_min,
            "re_rolls_max": self.re_rolls_max,
            "mastery_rank_min": self.mastery_rank_min,
            "mastery_rank_max": self.mastery_rank_max,
            "polarity": self.polarity.value if self.polarity else None,
            "sort_by": self.sort_by.value if self.sort_by else None,
        }
        if self.buyout_policy:
            params["buyout_policy"] = self.buyout_policy.value
        return params
