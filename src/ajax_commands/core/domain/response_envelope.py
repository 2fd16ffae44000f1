from __future__ import annotations

from dataclasses import dataclass

from ajax_commands.core.constants import JSON_MEDIA_TYPE


@dataclass
class ResponseEnvelope:
    """Transport-agnostic response container.

    Decouples the responder from FastAPI/Starlette Response. Adapters in the
    transport layer map this to the transport-specific response type.
    A ``content`` of None means only the headers are sent.
    """

    content: str | None = None
    headers: dict[str, str] | None = None
    status_code: int = 200
    media_type: str = JSON_MEDIA_TYPE
