from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ajax_commands.core.domain.response_envelope import ResponseEnvelope


class IAjaxResponder(ABC):
    """Interface for objects that turn command sequences into responses."""

    @abstractmethod
    def render(self, commands: Sequence[Any] = ()) -> str:
        """Serialize a command sequence to JSON text.

        Args:
            commands: Commands built with the ``command_*`` helpers

        Returns:
            The JSON array text
        """

    @abstractmethod
    def response(self, value: Any = ...) -> ResponseEnvelope:
        """Build the outgoing JSON response.

        Args:
            value: Optional payload; when omitted only the header is set

        Returns:
            The transport-agnostic response envelope
        """

    @property
    @abstractmethod
    def headers_sent(self) -> bool:
        """Whether ``response()`` has already been called."""
