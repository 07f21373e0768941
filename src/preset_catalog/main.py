"""
Audio Sampler Web - Preset Catalog
FastAPI backend serving presets, their sounds and the audio files
"""

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Dict

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.errors import register_exception_handlers
from .api.routes import presets, sounds
from .core.config import get_settings
from .core.logging import request_logger, setup_logging
from .database.connection import database_manager

logger = logging.getLogger("preset_catalog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events"""
    settings = get_settings()
    setup_logging()

    logger.info(f"Starting {settings.APP_NAME} on port {settings.PORT}...")

    try:
        await database_manager.initialize()
        if settings.CREATE_SCHEMA_ON_STARTUP:
            await database_manager.create_schema()
        logger.info("Database connection initialized")

    except Exception as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await database_manager.close()
    logger.info("Database connection closed")


def mount_audio_files(app: FastAPI) -> None:
    """Serve audio assets under /presets when the directory exists"""
    settings = get_settings()
    audio_path = Path(settings.AUDIO_FILES_PATH)

    if not audio_path.is_dir():
        logger.warning(
            f'Audio directory "{audio_path.resolve()}" does not exist, '
            "audio files will not be served"
        )
        return

    app.mount("/presets", StaticFiles(directory=str(audio_path)), name="presets")
    logger.info(f"Serving audio files from {audio_path.resolve()}")


def create_app() -> FastAPI:
    """Build the application with routes, middleware and error handlers"""
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Preset and sound catalog for the audio sampler",
        version=settings.APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        request_logger.log_request(
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000
        )
        return response

    register_exception_handlers(app)

    @app.get("/")
    async def app_info() -> Dict[str, Any]:
        """Service description and entry points"""
        return {
            "message": f"{settings.APP_NAME} - Serveur REST",
            "version": settings.APP_VERSION,
            "endpoints": {
                "presets": "/api/presets",
                "files": "/presets/*"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        if await database_manager.check_health():
            return {
                "status": "healthy",
                "version": settings.APP_VERSION,
                "services": {"database": "healthy"}
            }
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "version": settings.APP_VERSION,
                "services": {"database": "unhealthy"}
            }
        )

    app.include_router(presets.router, prefix="/api", tags=["Presets"])
    app.include_router(sounds.router, prefix="/api", tags=["Sounds"])

    if settings.SERVE_AUDIO_FILES:
        mount_audio_files(app)

    return app


def run() -> None:
    """Console entry point"""
    settings = get_settings()
    uvicorn.run(
        "preset_catalog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower()
    )


app = create_app()


if __name__ == "__main__":
    run()
