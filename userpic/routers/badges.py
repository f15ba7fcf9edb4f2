"""Badge endpoints."""

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from userpic.models.badge import BadgeSpec
from userpic.plugins.badge import layout_badge

router = APIRouter(tags=["Badges"])


@router.post("/layout")
async def badge_layout(request_body: BadgeSpec):
    """Visual state of a badge, no content when the badge is absent."""
    if not (state := layout_badge(request_body)):
        return Response(status_code=204)
    return JSONResponse(status_code=200, content=state.model_dump(mode="json"))
