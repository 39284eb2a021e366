"""Translate ticket errors into enveloped JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lottery.api.responses import ApiResponse
from lottery.tickets.errors import ErrorCode, TicketServiceError

logger = logging.getLogger(__name__)

STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_MODIFIABLE: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_NOT_CREATED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.INTERNAL_SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def format_error(code: ErrorCode, detail: str | None = None) -> str:
    message = f"[{code.value}] {code.title}"
    if detail:
        message = f"{message} - {detail}"
    return message


def _error_response(status_code: int, message: str) -> JSONResponse:
    body = ApiResponse.error(message).model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=body)


async def ticket_error_handler(request: Request, exc: TicketServiceError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info("%s %s failed with %s: %s", request.method, request.url.path, exc.code.value, exc.detail)
    return _error_response(status_code, format_error(exc.code, exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in exc.errors()
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, format_error(ErrorCode.INVALID_INPUT, details))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        format_error(ErrorCode.INTERNAL_SERVER_ERROR, str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TicketServiceError, ticket_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
