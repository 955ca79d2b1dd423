# src/wm_orders/domain/source.py
"""Order source Protocol - dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
WarframeMarketClient (wm_upstream) is the real implementation.
"""

from typing import Any, Protocol


class OrderSourceProtocol(Protocol):
    async def fetch_orders(
        self,
        url_name: str,
        platform: str | None = None,
        language: str | None = None,
        include_item: bool = False,
        auth: str | None = None,
    ) -> list[dict[str, Any]]: ...
