"""Domain models for wm_items - pure dataclasses, no business logic."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogItem:
    url_name: str  # slug, e.g. "loki_prime_set"
    item_name: str | None
    id: str | None = None
    thumb: str | None = None
