"""
Preset Catalog API Error Handlers
Maps the repository error taxonomy onto HTTP status codes
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.logging import catalog_logger
from ..database.repositories import (
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route non trouvée"
INTERNAL_ERROR = "Erreur interne du serveur"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return error_response(400, str(exc))


async def not_found_error_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(404, str(exc))


async def conflict_error_handler(request: Request, exc: ConflictError) -> JSONResponse:
    return error_response(409, str(exc))


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Store failures are logged with their cause and never leaked"""
    catalog_logger.log_store_error(f"{request.method} {request.url.path}", str(exc))
    logger.error(f"Store error: {exc}", exc_info=exc)
    return error_response(500, INTERNAL_ERROR)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields"""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return error_response(400, f"Requête invalide: {details}")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unmatched paths and methods both read as an unknown route"""
    if exc.status_code in (404, 405):
        return error_response(404, ROUTE_NOT_FOUND)
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for unhandled exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)
    return error_response(500, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(ConflictError, conflict_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
