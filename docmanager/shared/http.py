import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from docmanager.shared.errors import AppError

logger = logging.getLogger(__name__)


def err(message: str, status: int = 400) -> JSONResponse:
    # single error envelope for every failure path
    return JSONResponse(status_code=status, content={"error": message})


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_error(request: Request, exc: AppError):
        return err(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _bad_body(request: Request, exc: RequestValidationError):
        return err("Invalid request body", 400)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        # unmatched path or unmatched method: both are "no route" here
        if exc.status_code in (404, 405):
            return err("Route not found", 404)
        return err(str(exc.detail), exc.status_code)

    @app.exception_handler(SQLAlchemyError)
    async def _db_error(request: Request, exc: SQLAlchemyError):
        logger.error("%s on %s (500)", type(exc).__name__, request.url.path, exc_info=exc)
        return err("Database error", 500)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.error("%s on %s (500)", type(exc).__name__, request.url.path, exc_info=exc)
        return err("Internal error", 500)
