"""
Error handling middleware.
"""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from repairshop.config.logging import get_logger
from repairshop.domain.exceptions import RepairShopError

logger = get_logger(__name__)

STATUS_BY_KIND = {
    "validation_error": status.HTTP_400_BAD_REQUEST,
    "authorization_error": status.HTTP_403_FORBIDDEN,
    "not_found": status.HTTP_404_NOT_FOUND,
    "conflict": status.HTTP_409_CONFLICT,
    "persistence_error": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(error: RepairShopError) -> JSONResponse:
    """Render a domain error as the service's JSON error body."""
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        content=error.to_dict(),
    )


def add_error_handlers(app: FastAPI) -> None:
    """Add custom error handlers to FastAPI app."""

    @app.exception_handler(RepairShopError)
    async def repair_shop_error_handler(request: Request, exc: RepairShopError):
        logger.warning(
            "Request failed", error_kind=exc.kind, error=exc.message, path=request.url.path
        )
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.warning("Validation error", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "validation_error",
                "message": "Request body or parameters are invalid",
                "retryable": False,
                "details": {"errors": jsonable_errors(exc)},
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        kind = "unauthorized" if exc.status_code == 401 else "http_error"
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": kind,
                "message": exc.detail,
                "retryable": False,
                "details": {},
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception",
            error=str(exc),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "internal_error",
                "message": "An unexpected error occurred",
                "retryable": False,
                "details": {},
            },
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Field errors without the raw input, which may not be JSON serializable."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
