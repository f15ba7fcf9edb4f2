"""Avatar endpoints."""

import base64
import logging

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import JSONResponse

from config import settings
from userpic.avatar_generator import derive_identity, generate_initials_svg
from userpic.models.avatar import AvatarRequest
from userpic.plugins import AvatarStore, UnknownAvatarError, Userpic
from userpic.plugins.gravatar import resolve_remote_source
from userpic.utilities import default_color

router = APIRouter(tags=["Avatars"])
store = AvatarStore()
logger = logging.getLogger(__name__)


@router.post("/resolve")
async def resolve_avatar(request_body: AvatarRequest):
    """Resolve an avatar once, without keeping any state."""
    presentation = Userpic(request_body).render()
    return JSONResponse(status_code=200, content=presentation.model_dump(mode="json"))


@router.get("/initials.svg")
async def initials_image(
    name: str = Query(...),
    size: float = Query(settings.AVATAR_SIZE, gt=0),
    colorize: bool = Query(False),
    color: str = Query(None),
):
    """Initials avatar as an SVG image."""
    identity = derive_identity(name, colorize)
    data_uri = generate_initials_svg(
        identity.initials, identity.color or color or default_color(), size
    )
    svg = base64.b64decode(data_uri.split(",", 1)[1])
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/gravatar")
async def gravatar_source(email: str = Query(...), size: float = Query(settings.AVATAR_SIZE, gt=0)):
    """Remote image source for an email."""
    source = resolve_remote_source(size, email)
    return JSONResponse(status_code=200, content=source.model_dump(mode="json"))


@router.put("/{avatar_id}")
async def mount_avatar(avatar_id: str, request_body: AvatarRequest):
    """Mount an avatar or update its props."""
    avatar = store.mount(avatar_id, request_body)
    return JSONResponse(status_code=200, content=avatar.render().model_dump(mode="json"))


@router.get("/{avatar_id}")
async def get_avatar(avatar_id: str):
    """Current presentation of a mounted avatar."""
    try:
        avatar = store.get(avatar_id)
    except UnknownAvatarError:
        raise HTTPException(status_code=404, detail="Not Found")
    return JSONResponse(status_code=200, content=avatar.render().model_dump(mode="json"))


@router.post("/{avatar_id}/load-failure")
async def report_load_failure(avatar_id: str, generation: int = Query(None)):
    """Image loading failed for the avatar's current source."""
    try:
        avatar = store.get(avatar_id)
    except UnknownAvatarError:
        raise HTTPException(status_code=404, detail="Not Found")
    avatar.report_load_failure(generation)
    return JSONResponse(status_code=200, content=avatar.render().model_dump(mode="json"))


@router.delete("/{avatar_id}")
async def unmount_avatar(avatar_id: str):
    """Forget a mounted avatar."""
    if not store.unmount(avatar_id):
        raise HTTPException(status_code=404, detail="Not Found")
    return Response(status_code=204)
