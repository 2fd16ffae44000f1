"""
Ajax Controller

Dispatches client Ajax requests to registered callbacks and answers with
the rendered command list.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from ajax_commands.core.common.logging_utils import LogContext, get_logger
from ajax_commands.core.services.ajax_responder import AjaxResponder
from ajax_commands.core.services.callback_registry import AjaxCallbackRegistry
from ajax_commands.core.transport.fastapi.request_adapters import (
    get_ajax_responder,
    read_ajax_payload,
)
from ajax_commands.core.transport.fastapi.response_adapters import (
    to_fastapi_response,
)

logger = logging.getLogger(__name__)


class AjaxController:
    """Controller for Ajax callback endpoints."""

    def __init__(self, registry: AjaxCallbackRegistry) -> None:
        """Initialize the controller.

        Args:
            registry: Registry used to look up callbacks by name
        """
        self.registry = registry

    async def handle(
        self, name: str, payload: dict[str, Any], responder: AjaxResponder
    ) -> Response:
        """Run the named callback and build the JSON response.

        Coroutine callbacks are awaited; plain callbacks run in the threadpool
        so they do not block the event loop. A callback returning None
        produces a header-only response; any other result, including an
        empty list, is rendered as the body.

        Raises:
            CallbackNotFoundError: If no callback is registered under ``name``
        """
        callback = self.registry.get(name)

        with LogContext(get_logger(__name__), callback=name) as log:
            log.debug("Dispatching ajax callback")
            if inspect.iscoroutinefunction(callback):
                commands = await callback(payload)
            else:
                commands = await run_in_threadpool(callback, payload)
                if inspect.isawaitable(commands):
                    commands = await commands
            log.debug("Ajax callback finished", header_only=commands is None)

        envelope = (
            responder.response() if commands is None else responder.response(commands)
        )
        return to_fastapi_response(envelope)


def create_ajax_router(controller: AjaxController, prefix: str = "") -> APIRouter:
    """Create the router exposing ``POST {prefix}/{callback}``."""
    router = APIRouter(prefix=prefix, tags=["ajax"])

    @router.post("/{callback}")
    async def dispatch_ajax_callback(
        callback: str,
        request: Request,
        responder: AjaxResponder = Depends(get_ajax_responder),
    ) -> Response:
        payload = await read_ajax_payload(request)
        return await controller.handle(callback, payload, responder)

    return router
