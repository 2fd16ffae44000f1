"""
Ajax responder.

Serializes a command sequence to JSON and produces the outgoing response.
One responder is created per request; it holds no state besides whether
the response has been produced.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ajax_commands.core.constants import (
    CONTENT_TYPE_HEADER,
    JSON_MEDIA_TYPE,
    JSON_SEPARATORS,
)
from ajax_commands.core.domain.response_envelope import ResponseEnvelope
from ajax_commands.core.interfaces.responder_interface import IAjaxResponder

logger = logging.getLogger(__name__)

# Distinguishes "no value passed" from an explicit None or empty list
_ABSENT: Any = object()


def _encode_model(obj: Any) -> Any:
    """``json.dumps`` fallback that encodes pydantic models by their fields."""
    if hasattr(obj, "model_dump"):
        return obj.model_dump()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class AjaxResponder(IAjaxResponder):
    """Renders Ajax commands and wraps them in a JSON response envelope."""

    def __init__(self, *, ensure_ascii: bool = True) -> None:
        """Initialize the responder.

        Args:
            ensure_ascii: Escape non-ASCII characters in the rendered JSON
        """
        self._ensure_ascii = ensure_ascii
        self._headers_sent = False

    @property
    def headers_sent(self) -> bool:
        return self._headers_sent

    def render(self, commands: Sequence[Any] = ()) -> str:
        """Render a command list into JSON.

        Entries are encoded as given, without reordering or validation.
        Encoder errors (unencodable or cyclic values) propagate to the caller.

        Args:
            commands: Commands generated by the ``command_*`` builders

        Returns:
            The JSON array text
        """
        if logger.isEnabledFor(logging.DEBUG):
            try:
                count: int | str = len(commands)
            except TypeError:
                count = "?"
            logger.debug("Rendering %s ajax command(s)", count)

        return json.dumps(
            commands,
            default=_encode_model,
            separators=JSON_SEPARATORS,
            ensure_ascii=self._ensure_ascii,
        )

    def response(self, value: Any = _ABSENT) -> ResponseEnvelope:
        """Return data in JSON format.

        The content type is always set to JSON. The body is written only
        when ``value`` is passed, so ``response()`` sends the header alone
        while ``response([])`` sends ``[]``.

        Args:
            value: Optional commands to render as the response body

        Returns:
            The response envelope for the transport layer
        """
        content = None if value is _ABSENT else self.render(value)
        self._headers_sent = True
        return ResponseEnvelope(
            content=content,
            headers={CONTENT_TYPE_HEADER: JSON_MEDIA_TYPE},
            media_type=JSON_MEDIA_TYPE,
        )
