"""
Registry of server-side Ajax callbacks.

A client event (a button click, a form change) posts to a named callback.
The callback performs its server-side logic and returns the commands the
browser should run, or None when only the JSON header should be sent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from ajax_commands.core.common.exceptions import CallbackNotFoundError
from ajax_commands.core.constants import CALLBACK_NOT_FOUND_MESSAGE

logger = logging.getLogger(__name__)

AjaxCallback = Callable[[dict[str, Any]], Sequence[Any] | None]


class AjaxCallbackRegistry:
    """Maps callback names to the functions that build their command lists."""

    def __init__(self) -> None:
        self._callbacks: dict[str, AjaxCallback] = {}

    def register(self, name: str, callback: AjaxCallback) -> None:
        """
        Register a callback under a unique name.

        Args:
            name: The name used in the request path
            callback: Called with the request payload

        Raises:
            ValueError: If the name is empty or already registered
            TypeError: If the callback is not callable
        """
        if not isinstance(name, str) or not name:
            raise ValueError("Callback name must be a non-empty string.")
        if not callable(callback):
            raise TypeError("Ajax callback must be a callable.")
        if name in self._callbacks:
            raise ValueError(f"Ajax callback '{name}' is already registered.")

        self._callbacks[name] = callback
        logger.debug(f"Registered ajax callback: {name}")

    def callback(self, name: str) -> Callable[[AjaxCallback], AjaxCallback]:
        """Decorator form of :meth:`register`."""

        def decorator(func: AjaxCallback) -> AjaxCallback:
            self.register(name, func)
            return func

        return decorator

    def get(self, name: str) -> AjaxCallback:
        """
        Get a callback by name.

        Raises:
            CallbackNotFoundError: If no callback is registered under the name
        """
        callback = self._callbacks.get(name)
        if callback is None:
            raise CallbackNotFoundError(
                CALLBACK_NOT_FOUND_MESSAGE.format(name=name), callback_name=name
            )
        return callback

    def has(self, name: str) -> bool:
        return name in self._callbacks

    def names(self) -> list[str]:
        return list(self._callbacks.keys())


# Global instance of the registry
ajax_callback_registry = AjaxCallbackRegistry()
