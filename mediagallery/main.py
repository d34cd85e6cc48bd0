"""Media Gallery Backend - FastAPI Entry Point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .application.errors import InvalidFolderError, NotFoundError, UpstreamFetchError
from .config import CORS_ORIGINS, CORS_ORIGIN_REGEX, LOG_LEVEL

# Import routers
from .routes.home import router as home_router
from .routes.gallery import router as gallery_router

logger = logging.getLogger(__name__)


async def invalid_folder_handler(request: Request, exc: InvalidFolderError):
    logger.warning("Rejected folder %r: not in allow-list", exc.folder)
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": exc.message,
            "available_folders": exc.available_folders,
        }
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("No files in folder %r", exc.folder)
    return JSONResponse(
        status_code=404,
        content={
            "success": False,
            "message": exc.message,
            "available_folders": exc.available_folders,
            "hint": exc.hint,
        }
    )


async def upstream_error_handler(request: Request, exc: UpstreamFetchError):
    logger.error("Upstream error on %s: %s", request.url.path, exc.message, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": exc.message}
    )


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(title="Media Gallery", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_origin_regex=CORS_ORIGIN_REGEX or None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error bodies carry {"success": false, ...}; status code is secondary
    app.add_exception_handler(InvalidFolderError, invalid_folder_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UpstreamFetchError, upstream_error_handler)

    # Include routers
    app.include_router(home_router)
    app.include_router(gallery_router)

    return app


app = create_app()
