# tests/integration/test_rivens_flow.py
"""Endpoint tests for /riven/* and /items/{url_name}/dropsources."""

import pytest

pytestmark = pytest.mark.asyncio


class TestRivenCatalog:
    async def test_items(self, client, upstream):
        upstream.routes["/riven/items"] = (200, {"payload": {"items": [{"url_name": "lanka"}]}})

        resp = await client.get("/api/v1/riven/items")

        assert resp.status_code == 200
        assert resp.json()["data"] == [{"url_name": "lanka"}]

    async def test_attributes(self, client, upstream):
        upstream.routes["/riven/attributes"] = (
            200, {"payload": {"attributes": [{"url_name": "multishot", "group": "default"}]}},
        )

        resp = await client.get("/api/v1/riven/attributes?language=fr")

        assert resp.json()["data"][0]["url_name"] == "multishot"
        assert upstream.requests[0].headers["Language"] == "fr"


class TestRivenAuctions:
    async def test_search_forwards_filters(self, client, upstream):
        auctions = [{"id": "a1", "buyout_price": 400}, {"id": "a2", "buyout_price": 900}]
        upstream.routes["/auctions/search"] = (200, {"payload": {"auctions": auctions}})

        resp = await client.get(
            "/api/v1/riven/auctions",
            params={
                "weapon_url_name": "lanka",
                "positive_stats": ["critical_chance", "multishot"],
                "negative_stats": "None",
                "min_rank": 8,
                "polarity": "madurai",
                "sort_by": "price_asc",
                "buyout_policy": "direct",
                "platform": "ps4",
            },
        )

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["count"] == 2
        assert [a["id"] for a in data["auctions"]] == ["a1", "a2"]

        params = upstream.requests[0].url.params
        assert params["type"] == "riven"
        assert params["positive_stats"] == "critical_chance,multishot"
        assert params["negative_stats"] == "None"
        assert params["min_rank"] == "8"
        assert params["buyout_policy"] == "direct"
        assert "max_rank" not in params
        assert upstream.requests[0].headers["Platform"] == "ps4"

    async def test_buyout_policy_omitted_when_unset(self, client, upstream):
        upstream.routes["/auctions/search"] = (200, {"payload": {"auctions": []}})

        resp = await client.get("/api/v1/riven/auctions?weapon_url_name=lanka")

        assert resp.json()["data"] == {"count": 0, "auctions": []}
        assert "buyout_policy" not in upstream.requests[0].url.params

    async def test_invalid_polarity_rejected(self, client, upstream):
        resp = await client.get("/api/v1/riven/auctions?polarity=unairu")

        assert resp.status_code == 422
        assert upstream.requests == []

    async def test_upstream_failure(self, client, upstream):
        upstream.routes["/auctions/search"] = (500, {"error": "down"})

        resp = await client.get("/api/v1/riven/auctions")

        assert resp.status_code == 502
        assert resp.json()["code"] == 2001


class TestDropsources:
    async def test_dropsources(self, client, upstream):
        upstream.routes["/items/loki_prime_set/dropsources"] = (
            200, {"payload": {"dropsources": [{"id": "d1", "relic": "lith_l1"}]}},
        )

        resp = await client.get("/api/v1/items/loki_prime_set/dropsources?include_item=true")

        assert resp.json()["data"] == [{"id": "d1", "relic": "lith_l1"}]
        assert upstream.requests[0].url.params["include"] == "item"
