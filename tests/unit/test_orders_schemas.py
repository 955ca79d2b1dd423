import json

from src.wm_common.enums import StatusFloor
from src.wm_orders.application.schemas import OrdersSummaryResponse
from src.wm_orders.domain.models import BestQuote, FilterCriteria, OrderSummary


def _quote(**kwargs: object) -> BestQuote:
    defaults: dict[str, object] = dict(
        platinum=80, quantity=1, user="Tenno", region="en", last_update="2026-01-01",
        platform="pc", subtype=None, status="ingame", reputation=4,
    )
    defaults.update(kwargs)
    return BestQuote(**defaults)  # type: ignore[arg-type]


def _summary(**kwargs: object) -> OrderSummary:
    defaults: dict[str, object] = dict(
        best_sell=_quote(), best_buy=None, mid_sell=90, mid_buy=None,
        spread_abs=-90, spread_pct=-1.0, total_sells=2, total_buys=0,
        criteria=FilterCriteria(status_floor=StatusFloor.INGAME, min_reputation=3),
        depth=2,
    )
    defaults.update(kwargs)
    return OrderSummary(**defaults)  # type: ignore[arg-type]


class TestOrdersSummaryResponse:
    def test_wire_shape(self) -> None:
        data = OrdersSummaryResponse.from_domain(_summary()).model_dump()
        assert set(data) == {"best_sell", "best_buy", "midpoints", "spread", "totals", "filters"}
        assert data["best_sell"]["platinum"] == 80
        assert data["best_buy"] is None
        assert data["midpoints"] == {"sell": 90, "buy": None}
        assert data["spread"] == {"absolute": -90, "pct": -1.0}
        assert data["totals"] == {"sells": 2, "buys": 0}
        assert data["filters"] == {
            "status": "ingame", "min_reputation": 3, "region": None, "depth": 2,
        }

    def test_absent_pct_stays_null(self) -> None:
        data = OrdersSummaryResponse.from_domain(
            _summary(best_sell=None, mid_sell=None, spread_abs=0, spread_pct=None)
        ).model_dump()
        assert data["spread"]["pct"] is None
        assert data["midpoints"]["sell"] is None

    def test_json_serializable(self) -> None:
        resp = OrdersSummaryResponse.from_domain(_summary())
        assert json.loads(resp.model_dump_json())["best_sell"]["user"] == "Tenno"
