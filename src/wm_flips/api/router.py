"""wm_flips REST endpoints.

POST /flips   - rank items by midpoint spread (body: FlipsRequest)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.wm_common.response import ApiResponse, success_response
from src.wm_flips.application.schemas import FlipsRequest
from src.wm_flips.application.service import FlipsApplicationService
from src.wm_gateway.auth.dependencies import get_forwarded_token

router = APIRouter(prefix="/flips", tags=["flips"])

_service = FlipsApplicationService()


@router.post("")
async def rank_flips(
    body: FlipsRequest,
    request: Request,
    token: Annotated[str | None, Depends(get_forwarded_token)],
) -> ApiResponse:
    result = await _service.rank_flips(
        body.url_names,
        body.query,
        body.criteria(),
        body.depth,
        body.min_spread_pct,
        body.limit_search,
        platform=body.platform.value if body.platform else None,
        language=body.language,
        auth=token,
    )
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
