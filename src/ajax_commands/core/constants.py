"""Constants shared by the Ajax command builders, responder and transport.

Keeping the wire vocabulary in one place keeps the server side and the
browser-side interpreter in step.
"""

from __future__ import annotations

# Command kinds understood by the client-side interpreter
COMMAND_ALERT = "alert"
COMMAND_INSERT = "insert"
COMMAND_REMOVE = "remove"
COMMAND_CSS = "css"
COMMAND_SETTINGS = "settings"
COMMAND_DATA = "data"
COMMAND_INVOKE = "invoke"

COMMAND_KINDS: tuple[str, ...] = (
    COMMAND_ALERT,
    COMMAND_INSERT,
    COMMAND_REMOVE,
    COMMAND_CSS,
    COMMAND_SETTINGS,
    COMMAND_DATA,
    COMMAND_INVOKE,
)

# DOM manipulation methods conventionally used with the insert command
INSERT_METHODS: tuple[str, ...] = (
    "replaceWith",
    "append",
    "prepend",
    "before",
    "after",
    "html",
)

JSON_MEDIA_TYPE = "application/json"
CONTENT_TYPE_HEADER = "Content-Type"

# Compact separators keep the payload identical to the CMS encoder output
JSON_SEPARATORS: tuple[str, str] = (",", ":")

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_ROUTE_PREFIX = "/ajax"

# Error messages
CALLBACK_NOT_FOUND_MESSAGE = "Ajax callback '{name}' is not registered"
HTTP_500_INTERNAL_SERVER_ERROR_MESSAGE = "An unexpected error occurred"
