"""wm_orders REST endpoints.

GET /items/{url_name}/orders     - summary (default) or filtered raw orders
GET /items/{url_name}/snapshot   - {url_name, platform, summary}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.wm_common.enums import Platform, StatusFloor
from src.wm_common.response import ApiResponse, success_response
from src.wm_gateway.auth.dependencies import get_forwarded_token
from src.wm_orders.application.service import OrdersApplicationService
from src.wm_orders.domain.models import FilterCriteria

router = APIRouter(prefix="/items", tags=["orders"])

_service = OrdersApplicationService()


def filter_criteria(
    status: StatusFloor = Query(
        StatusFloor.ANY,
        description="'ingame' = ONLINE IN GAME only; 'online' = ingame or online; 'any' = no filter.",
    ),
    min_reputation: int | None = Query(None, description="Minimum seller reputation."),
    region: str | None = Query(None, description="Order or seller region (e.g. 'en')."),
) -> FilterCriteria:
    return FilterCriteria(status_floor=status, min_reputation=min_reputation, region=region)


@router.get("/{url_name}/orders")
async def get_orders(
    url_name: str,
    request: Request,
    criteria: Annotated[FilterCriteria, Depends(filter_criteria)],
    token: Annotated[str | None, Depends(get_forwarded_token)],
    summarize: bool = Query(True),
    include_item: bool = Query(False),
    platform: Platform | None = Query(None),
    language: str | None = Query(None),
    depth: int | None = Query(None, description="Top-k window for midpoints, clamped to 1-10. Default 5."),
) -> ApiResponse:
    result = await _service.get_orders(
        url_name,
        criteria,
        depth,
        summarize=summarize,
        platform=platform.value if platform else None,
        language=language,
        include_item=include_item,
        auth=token,
    )
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{url_name}/snapshot")
async def price_snapshot(
    url_name: str,
    request: Request,
    criteria: Annotated[FilterCriteria, Depends(filter_criteria)],
    token: Annotated[str | None, Depends(get_forwarded_token)],
    platform: Platform | None = Query(None),
    language: str | None = Query(None),
    depth: int | None = Query(None),
) -> ApiResponse:
    result = await _service.price_snapshot(
        url_name,
        criteria,
        depth,
        platform=platform.value if platform else None,
        language=language,
        auth=token,
    )
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
