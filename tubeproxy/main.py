import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tubeproxy.config import get_settings
from tubeproxy.exceptions import TubeproxyError, UnknownError
from tubeproxy.models.common import ErrorResponse, HealthResponse
from tubeproxy.routers.channels import router as channels_router
from tubeproxy.routers.playlists import router as playlists_router
from tubeproxy.routers.videos import router as videos_router

logger = logging.getLogger(__name__)


# --- FastAPI app ---

api = FastAPI(title="Tubeproxy", version="0.1.0")
api.include_router(videos_router)
api.include_router(channels_router)
api.include_router(playlists_router)


@api.get("/health")
def health() -> HealthResponse:
    return HealthResponse()


# --- Exception handlers ---

@api.exception_handler(TubeproxyError)
async def tubeproxy_error_handler(request: Request, exc: TubeproxyError):
    return JSONResponse(status_code=exc.status_code, content=ErrorResponse(error=str(exc)).model_dump())


@api.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ())[1:])
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    error = ErrorResponse(error="; ".join(messages) or "Invalid request.")
    return JSONResponse(status_code=400, content=error.model_dump())


@api.exception_handler(Exception)
async def unknown_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    error = UnknownError(str(exc) or "Unknown error")
    return JSONResponse(status_code=error.status_code, content=ErrorResponse(error=str(error)).model_dump())


def run():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    if not settings.youtube_api_key:
        logger.error("YOUTUBE_API_KEY environment variable is required.")
        raise SystemExit(1)
    logger.info("Tubeproxy listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "tubeproxy.main:api",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
