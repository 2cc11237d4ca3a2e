"""Content filter API endpoints."""

from fastapi import APIRouter

from .dependencies import ContentFilterDep, handle_censor_error
from .schemas import CheckRequest, CheckResponse
from .service import CensorError


router = APIRouter(tags=["censor"])


@router.post(
    "/check",
    response_model=CheckResponse,
    summary="Check text against the denylist",
)
async def check_text(
    data: CheckRequest,
    content_filter: ContentFilterDep,
) -> CheckResponse:
    """Return 200 if the text is acceptable, 400 if it is not."""
    try:
        content_filter.check(data.text)
    except CensorError as e:
        raise handle_censor_error(e) from e

    return CheckResponse(message="Text passed censorship check")
