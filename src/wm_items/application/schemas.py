from pydantic import BaseModel

from src.wm_items.domain.models import CatalogItem


class ItemOut(BaseModel):
    id: str | None
    url_name: str
    item_name: str | None
    thumb: str | None

    @classmethod
    def from_domain(cls, it: CatalogItem) -> "ItemOut":
        return cls(id=it.id, url_name=it.url_name, item_name=it.item_name, thumb=it.thumb)


class SearchItemsResponse(BaseModel):
    query: str
    count: int
    items: list[ItemOut]
