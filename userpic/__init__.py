import logging

from fastapi import FastAPI, APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from userpic.routers import avatars, badges
from config import settings

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


app = FastAPI(title=settings.PROJECT_TITLE, version=settings.PROJECT_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_router = APIRouter()


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Error handling debug."""
    exc_str = f"{exc}".replace("\n", " ").replace("   ", " ")
    logging.error(f"{request}: {exc_str}")
    content = {"status_code": 10422, "message": exc_str, "data": None}
    return JSONResponse(content=content, status_code=422)


@api_router.get("/api/server/status", tags=["Server"])
async def server_status():
    """Server status endpoint."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "pixelRatio": settings.PIXEL_RATIO,
            "colorScheme": settings.COLOR_SCHEME,
        },
    )


api_router.include_router(avatars.router, prefix="/api/avatars")
api_router.include_router(badges.router, prefix="/api/badges")

app.include_router(api_router)
