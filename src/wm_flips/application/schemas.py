# src/wm_flips/application/schemas.py
from pydantic import BaseModel, ConfigDict, field_validator

from src.wm_common.enums import Platform, StatusFloor
from src.wm_flips.domain.models import FlipCandidate
from src.wm_orders.application.schemas import FiltersOut, QuoteOut, TotalsOut
from src.wm_orders.domain.models import FilterCriteria


class FlipsRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    url_names: list[str] | None = None
    query: str | None = None
    limit_search: int | None = 10  # clamped to 1-50
    platform: Platform | None = None
    language: str | None = None
    status: StatusFloor = StatusFloor.INGAME
    min_reputation: int | None = None
    region: str | None = None
    depth: int | None = 3  # clamped to 1-10
    min_spread_pct: float = 0.0  # 0.1 = 10%

    @field_validator("url_names")
    @classmethod
    def drop_blank_names(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return [name for name in v if name and name.strip()]

    def criteria(self) -> FilterCriteria:
        return FilterCriteria(
            status_floor=self.status,
            min_reputation=self.min_reputation,
            region=self.region,
        )


class FlipRow(BaseModel):
    url_name: str
    mid_sell: float | None = None
    mid_buy: float | None = None
    spread_abs: float | None = None
    spread_pct: float | None = None
    totals: TotalsOut | None = None
    filters: FiltersOut | None = None
    best_sell: QuoteOut | None = None
    best_buy: QuoteOut | None = None
    error: str | None = None

    @classmethod
    def from_domain(cls, c: FlipCandidate) -> "FlipRow":
        s = c.summary
        if s is None:
            return cls(url_name=c.url_name, error=c.error)
        return cls(
            url_name=c.url_name,
            mid_sell=s.mid_sell,
            mid_buy=s.mid_buy,
            spread_abs=s.spread_abs,
            spread_pct=s.spread_pct,
            totals=TotalsOut(sells=s.total_sells, buys=s.total_buys),
            filters=FiltersOut.from_criteria(s.criteria, s.depth),
            best_sell=QuoteOut.from_domain(s.best_sell),
            best_buy=QuoteOut.from_domain(s.best_buy),
        )


class FlipsResponse(BaseModel):
    count: int
    results: list[FlipRow]
