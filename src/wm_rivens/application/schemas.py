from typing import Any

from pydantic import BaseModel


class RivenAuctionsResponse(BaseModel):
    count: int
    auctions: list[dict[str, Any]]
