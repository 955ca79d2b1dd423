"""wm_items REST endpoints.

GET /items                 - catalog search (?query=&limit=)
GET /items/{url_name}      - item metadata as returned upstream
GET /items/{url_name}/dropsources - drop locations as returned upstream
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.wm_common.response import ApiResponse, success_response
from src.wm_gateway.auth.dependencies import get_forwarded_token
from src.wm_items.application.service import ItemsApplicationService

router = APIRouter(prefix="/items", tags=["items"])

_service = ItemsApplicationService()


@router.get("")
async def search_items(
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
    query: str = Query(..., description="Case-insensitive text matched against name or url_name."),
    limit: int | None = Query(None, description="Max results, clamped to 1-100. Default 10."),
    language: str | None = Query(None),
) -> ApiResponse:
    result = await _service.search_items(query, limit, language=language, auth=token)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{url_name}")
async def get_item(
    url_name: str,
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
    language: str | None = Query(None),
) -> ApiResponse:
    item = await _service.get_item(url_name, language=language, auth=token)
    resp = success_response(item)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{url_name}/dropsources")
async def get_dropsources(
    url_name: str,
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
    include_item: bool = Query(False),
    language: str | None = Query(None),
) -> ApiResponse:
    sources = await _service.get_dropsources(
        url_name, include_item=include_item, language=language, auth=token
    )
    resp = success_response(sources)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
