from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException

from ajax_commands.core.common.exceptions import AjaxCommandsError
from ajax_commands.core.constants import HTTP_500_INTERNAL_SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    """Handle FastAPI HTTP exceptions.

    Args:
        request: The request that caused the exception
        exc: The HTTP exception

    Returns:
        JSON response with error details
    """
    if logger.isEnabledFor(logging.WARNING):
        logger.warning(f"HTTP error {exc.status_code}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": str(exc.detail),
                "type": "HttpError",
            }
        },
        headers=getattr(exc, "headers", None),
    )


async def ajax_exception_handler(request: Request, exc: AjaxCommandsError) -> Response:
    """Handle AjaxCommandsError exceptions.

    Args:
        request: The request that caused the exception
        exc: The domain exception

    Returns:
        A JSON response with the exception's status code and details
    """
    if logger.isEnabledFor(logging.WARNING):
        logger.warning(f"{exc.__class__.__name__} ({exc.status_code}): {exc.message}")
    if exc.details and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Error details: {exc.details}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle any exception not covered by a more specific handler.

    Args:
        request: The request that caused the exception
        exc: The exception

    Returns:
        A generic 500 JSON response
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "message": HTTP_500_INTERNAL_SERVER_ERROR_MESSAGE,
                "type": "server_error",
            }
        },
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register the exception handlers on a FastAPI app."""
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(AjaxCommandsError, ajax_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, general_exception_handler)
