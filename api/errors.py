"""
Exception handlers — convert every failure into a JSON ``{"message": ...}`` body.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from utils.errors import AppError, UnexpectedError

logger = logging.getLogger(__name__)


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


def register_error_handlers(app: FastAPI) -> None:
    """Attach the handlers for domain, validation, store and unexpected errors."""

    @app.exception_handler(AppError)
    async def _handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        if exc.status >= 500:
            logger.error(
                "[%s] %s %s — %s: %s",
                _request_id(request), request.method, request.url.path, exc.message, exc.detail,
            )
        return JSONResponse(status_code=int(exc.status), content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def _handle_bad_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def _handle_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "[%s] Store failure on %s %s", _request_id(request), request.method, request.url.path
        )
        error = UnexpectedError("Server error", detail=str(exc))
        return JSONResponse(status_code=int(error.status), content=error.to_dict())

    @app.exception_handler(Exception)
    async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "[%s] Unhandled exception on %s %s", _request_id(request), request.method, request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error", "error": str(exc)},
        )
