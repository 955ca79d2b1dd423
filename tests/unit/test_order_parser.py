import pytest

from src.wm_common.enums import OrderType, SellerStatus
from src.wm_orders.domain.models import MISSING_REPUTATION, Seller
from src.wm_orders.domain.parser import parse_order, parse_orders


def _raw(**kwargs: object) -> dict:
    defaults: dict[str, object] = dict(
        id="o1", order_type="sell", platinum=45, quantity=2,
        platform="pc", region="en", last_update="2026-01-01T00:00:00.000+00:00",
        user={"ingame_name": "Tenno", "status": "ingame", "reputation": 12, "region": "en"},
    )
    defaults.update(kwargs)
    return defaults


class TestParseOrder:
    def test_full_order(self) -> None:
        o = parse_order(_raw(subtype="radiant"))
        assert o.id == "o1"
        assert o.order_type is OrderType.SELL
        assert o.platinum == 45
        assert o.quantity == 2
        assert o.subtype == "radiant"
        assert o.seller.display_name == "Tenno"
        assert o.seller.status is SellerStatus.INGAME
        assert o.seller.reputation == 12

    def test_missing_visible_defaults_to_true(self) -> None:
        assert parse_order(_raw()).visible is True

    def test_explicit_false_is_hidden(self) -> None:
        assert parse_order(_raw(visible=False)).visible is False

    def test_only_literal_false_hides(self) -> None:
        # 0 / "" are not `false`; only the literal flag hides an order
        assert parse_order(_raw(visible=0)).visible is True

    def test_raw_dict_kept_for_echo(self) -> None:
        raw = _raw()
        assert parse_order(raw).raw is raw

    def test_unknown_order_type_is_none(self) -> None:
        assert parse_order(_raw(order_type="trade")).order_type is None

    def test_float_platinum_coerced(self) -> None:
        assert parse_order(_raw(platinum=30.0)).platinum == 30

    @pytest.mark.parametrize("price", [None, 12.5, -3, "cheap", True])
    def test_unusable_price_rejected(self, price: object) -> None:
        with pytest.raises(ValueError, match="platinum"):
            parse_order(_raw(platinum=price))

    def test_numeric_string_price_accepted(self) -> None:
        assert parse_order(_raw(platinum="40")).platinum == 40


class TestParseSeller:
    def test_missing_user(self) -> None:
        o = parse_order(_raw(user=None))
        assert o.seller == Seller()
        assert o.seller.status is None

    def test_unrecognised_status_is_unknown(self) -> None:
        o = parse_order(_raw(user={"status": "afk"}))
        assert o.seller.status is SellerStatus.UNKNOWN

    def test_missing_reputation_is_negative_infinity_for_thresholds(self) -> None:
        o = parse_order(_raw(user={"status": "online"}))
        assert o.seller.reputation is None
        assert o.seller.reputation_for_threshold == MISSING_REPUTATION

    def test_display_name_falls_back_to_name(self) -> None:
        o = parse_order(_raw(user={"name": "alt_id"}))
        assert o.seller.display_name == "alt_id"

    def test_bool_reputation_rejected(self) -> None:
        o = parse_order(_raw(user={"reputation": True}))
        assert o.seller.reputation is None


class TestParseOrders:
    def test_skips_non_objects(self) -> None:
        orders = parse_orders([_raw(), None, "junk", _raw(id="o2")])
        assert [o.id for o in orders] == ["o1", "o2"]

    def test_skips_orders_without_price(self) -> None:
        missing = _raw(id="no_price")
        del missing["platinum"]
        orders = parse_orders([missing, _raw(id="frac", platinum=12.5), _raw(id="ok", platinum=40)])
        assert [o.id for o in orders] == ["ok"]

    def test_empty(self) -> None:
        assert parse_orders([]) == []
