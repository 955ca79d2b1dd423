"""wm_rivens REST endpoints.

GET /riven/items        - riven-capable weapons (weapon_url_name values)
GET /riven/attributes   - stat slugs for positive_stats / negative_stats
GET /riven/auctions     - riven auction search -> {count, auctions}
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.wm_common.enums import BuyoutPolicy, Platform, Polarity, RivenSort
from src.wm_common.response import ApiResponse, success_response
from src.wm_gateway.auth.dependencies import get_forwarded_token
from src.wm_rivens.application.service import RivensApplicationService
from src.wm_rivens.domain.models import RivenAuctionQuery

router = APIRouter(prefix="/riven", tags=["rivens"])

_service = RivensApplicationService()


def auction_query(
    weapon_url_name: str | None = Query(None, description="Weapon slug, see GET /riven/items."),
    positive_stats: list[str] | None = Query(None, description="Repeat or comma-separate."),
    negative_stats: list[str] | None = Query(None, description="['None'] requests no negative."),
    min_rank: int | None = Query(None),
    max_rank: int | None = Query(None),
    re_rolls_min: int | None = Query(None),
    re_rolls_max: int | None = Query(None),
    mastery_rank_min: int | None = Query(None),
    mastery_rank_max: int | None = Query(None),
    polarity: Polarity | None = Query(None),
    sort_by: RivenSort | None = Query(None),
    buyout_policy: BuyoutPolicy | None = Query(None),
) -> RivenAuctionQuery:
    return RivenAuctionQuery(
        weapon_url_name=weapon_url_name,
        positive_stats=positive_stats,
        negative_stats=negative_stats,
        min_rank=min_rank,
        max_rank=max_rank,
        re_rolls_min=re_rolls_min,
        re_rolls_max=re_rolls_max,
        mastery_rank_min=mastery_rank_min,
        mastery_rank_max=mastery_rank_max,
        polarity=polarity,
        sort_by=sort_by,
        buyout_policy=buyout_policy,
    )


@router.get("/items")
async def list_riven_items(
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
    language: str | None = Query(None),
) -> ApiResponse:
    items = await _service.list_items(language=language, auth=token)
    resp = success_response(items)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/attributes")
async def list_riven_attributes(
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
    language: str | None = Query(None),
) -> ApiResponse:
    attributes = await _service.list_attributes(language=language, auth=token)
    resp = success_response(attributes)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/auctions")
async def search_riven_auctions(
    request: Request,
    query: Annotated[RivenAuctionQuery, Depends(auction_query)],
    token: Annotated[str | None, Depends(get_forwarded_token)],
    platform: Platform | None = Query(None),
    language: str | None = Query(None),
) -> ApiResponse:
    result = await _service.search_auctions(
        query,
        platform=platform.value if platform else None,
        language=language,
        auth=token,
    )
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
