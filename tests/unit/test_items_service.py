from unittest.mock import AsyncMock, MagicMock

import pytest

from src.wm_common.errors import MissingItemIdError, MissingQueryError
from src.wm_items.application.service import ItemsApplicationService
from src.wm_items.domain.search import parse_catalog, search_catalog

CATALOG = [
    {"id": "1", "url_name": "loki_prime_set", "item_name": "Loki Prime Set", "thumb": "a.png"},
    {"id": "2", "url_name": "ash_prime_set", "item_name": "Ash Prime Set"},
    {"id": "3", "url_name": "arcane_energize", "item_name": "Arcane Energize"},
    {"id": "4", "item_name": "No Slug"},
    "junk",
]


class TestCatalogSearch:
    def test_parse_skips_entries_without_slug(self) -> None:
        items = parse_catalog(CATALOG)
        assert [it.url_name for it in items] == ["loki_prime_set", "ash_prime_set", "arcane_energize"]

    def test_case_insensitive_name_match(self) -> None:
        found = search_catalog(parse_catalog(CATALOG), "PRIME", 10)
        assert [it.url_name for it in found] == ["loki_prime_set", "ash_prime_set"]

    def test_slug_match(self) -> None:
        found = search_catalog(parse_catalog(CATALOG), "energize", 10)
        assert [it.url_name for it in found] == ["arcane_energize"]

    def test_limit(self) -> None:
        assert len(search_catalog(parse_catalog(CATALOG), "a", 1)) == 1


@pytest.fixture
def mock_source():
    src = MagicMock()
    src.fetch_items = AsyncMock(return_value=CATALOG)
    src.fetch_item = AsyncMock(return_value={"url_name": "loki_prime_set"})
    src.fetch_dropsources = AsyncMock(return_value=[{"id": "ds1", "type": "relic"}])
    return src


class TestSearchItems:
    @pytest.mark.asyncio
    async def test_response_shape(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        resp = await svc.search_items("loki")

        assert resp.query == "loki"
        assert resp.count == 1
        assert resp.items[0].thumb == "a.png"

    @pytest.mark.asyncio
    async def test_limit_clamped_to_100(self, mock_source):
        mock_source.fetch_items = AsyncMock(
            return_value=[{"url_name": f"item_{i}", "item_name": f"Item {i}"} for i in range(150)]
        )
        svc = ItemsApplicationService(source=mock_source)

        resp = await svc.search_items("item", limit=500)

        assert resp.count == 100

    @pytest.mark.asyncio
    async def test_default_limit_10(self, mock_source):
        mock_source.fetch_items = AsyncMock(
            return_value=[{"url_name": f"item_{i}"} for i in range(30)]
        )
        svc = ItemsApplicationService(source=mock_source)

        assert (await svc.search_items("item")).count == 10

    @pytest.mark.asyncio
    async def test_missing_query_raises(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        with pytest.raises(MissingQueryError):
            await svc.search_items("")
        mock_source.fetch_items.assert_not_awaited()


class TestGetItem:
    @pytest.mark.asyncio
    async def test_passthrough(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        item = await svc.get_item("loki_prime_set", language="es")

        assert item == {"url_name": "loki_prime_set"}
        mock_source.fetch_item.assert_awaited_once_with("loki_prime_set", language="es", auth=None)

    @pytest.mark.asyncio
    async def test_missing_url_name(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        with pytest.raises(MissingItemIdError):
            await svc.get_item("")


class TestGetDropsources:
    @pytest.mark.asyncio
    async def test_forwards_include_item(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        sources = await svc.get_dropsources("loki_prime_set", include_item=True, auth="tok")

        assert sources == [{"id": "ds1", "type": "relic"}]
        mock_source.fetch_dropsources.assert_awaited_once_with(
            "loki_prime_set", language=None, include_item=True, auth="tok"
        )

    @pytest.mark.asyncio
    async def test_missing_url_name(self, mock_source):
        svc = ItemsApplicationService(source=mock_source)

        with pytest.raises(MissingItemIdError):
            await svc.get_dropsources("")
        mock_source.fetch_dropsources.assert_not_awaited()
