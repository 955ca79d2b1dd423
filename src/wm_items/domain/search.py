"""Client-side catalog search. Upstream has no search endpoint; /items
returns the whole catalog and we filter it locally."""

from typing import Any

from src.wm_items.domain.models import CatalogItem


def _opt_str(value: Any) -> str | None:
    return str(value) if value is not None else None


def parse_catalog(raw_items: list[Any]) -> list[CatalogItem]:
    """Entries without a url_name cannot be looked up later; skip them."""
    items = []
    for raw in raw_items:
        if not isinstance(raw, dict) or not isinstance(raw.get("url_name"), str):
            continue
        items.append(
            CatalogItem(
                url_name=raw["url_name"],
                item_name=_opt_str(raw.get("item_name")),
                id=_opt_str(raw.get("id")),
                thumb=_opt_str(raw.get("thumb")),
            )
        )
    return items


def matches(item: CatalogItem, query: str) -> bool:
    q = query.lower()
    return q in (item.item_name or "").lower() or q in item.url_name.lower()


def search_catalog(items: list[CatalogItem], query: str, limit: int) -> list[CatalogItem]:
    """First `limit` items whose name or slug contains `query` (case-insensitive)."""
    return [it for it in items if matches(it, query)][:limit]
