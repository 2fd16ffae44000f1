"""
Application factory for creating the FastAPI application.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI

from ajax_commands.core.app.controllers.ajax_controller import (
    AjaxController,
    create_ajax_router,
)
from ajax_commands.core.app.error_handlers import configure_exception_handlers
from ajax_commands.core.config.app_config import AppConfig
from ajax_commands.core.services.callback_registry import (
    AjaxCallbackRegistry,
    ajax_callback_registry,
)

logger = logging.getLogger(__name__)


def build_app(
    config: AppConfig | dict[str, Any] | None = None,
    registry: AjaxCallbackRegistry | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: The application configuration (AppConfig object or dict);
            read from the environment when omitted
        registry: Callback registry to serve, defaults to the global one

    Returns:
        The FastAPI ASGI application instance.
    """
    if config is None:
        config = AppConfig.from_env()
    elif isinstance(config, dict):
        config = AppConfig(**config)

    if registry is None:
        registry = ajax_callback_registry

    app = FastAPI(title="Ajax Commands")
    app.state.app_config = config
    app.state.callback_registry = registry

    configure_exception_handlers(app)
    app.include_router(create_ajax_router(AjaxController(registry), config.route_prefix))

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Serving %d ajax callback(s) under '%s/'",
            len(registry.names()),
            config.route_prefix,
        )
    return app
