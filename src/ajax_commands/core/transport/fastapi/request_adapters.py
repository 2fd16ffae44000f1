"""
FastAPI request adapters.

Dependencies that build per-request domain objects from the FastAPI request.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import Request

from ajax_commands.core.config.app_config import AppConfig
from ajax_commands.core.constants import JSON_MEDIA_TYPE
from ajax_commands.core.services.ajax_responder import AjaxResponder

logger = logging.getLogger(__name__)


def get_ajax_responder(request: Request) -> AjaxResponder:
    """Create a fresh responder for the current request."""
    config = getattr(request.app.state, "app_config", None)
    if not isinstance(config, AppConfig):
        config = AppConfig()
    return AjaxResponder(ensure_ascii=config.json_options.ensure_ascii)


async def read_ajax_payload(request: Request) -> dict[str, Any]:
    """Read the callback payload from a JSON request body.

    Empty bodies, undecodable JSON and JSON values that are not objects
    all yield an empty payload.
    """
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Ignoring ajax request body that is not %s", JSON_MEDIA_TYPE
            )
        return {}
    return payload if isinstance(payload, dict) else {}
