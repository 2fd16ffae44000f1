"""
FastAPI response adapters.

This module contains adapters for converting domain response envelopes
to FastAPI/Starlette response objects.
"""

from __future__ import annotations

import logging

from fastapi.responses import Response

from ajax_commands.core.domain.response_envelope import ResponseEnvelope

logger = logging.getLogger(__name__)


def to_fastapi_response(envelope: ResponseEnvelope) -> Response:
    """Convert a response envelope to a FastAPI response.

    The envelope content is already rendered JSON text and is sent as-is.
    A missing content produces a header-only response with an empty body.

    Args:
        envelope: The domain response envelope

    Returns:
        A FastAPI response
    """
    headers = dict(envelope.headers or {})
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Sending %s response (%s)",
            envelope.media_type,
            "header only" if envelope.content is None else "with body",
        )
    return Response(
        content=envelope.content,
        status_code=envelope.status_code,
        headers=headers,
        media_type=envelope.media_type,
    )
