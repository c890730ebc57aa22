"""Shared helpers for API routes (error responses)."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.posts import MALFORMED_BODY_ERROR, PostError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Every API error is a JSON object with a single `error` string."""
    return JSONResponse({"error": message}, status_code=status_code)


async def post_error_handler(request: Request, exc: PostError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return error_response(400, MALFORMED_BODY_ERROR)
