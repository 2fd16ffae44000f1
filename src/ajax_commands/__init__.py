"""Build and serialize Ajax client-update commands."""

from ajax_commands.core.constants import COMMAND_KINDS, INSERT_METHODS
from ajax_commands.core.domain.commands import (
    COMMAND_BUILDERS,
    AjaxCommand,
    AlertCommand,
    CssCommand,
    DataCommand,
    InsertCommand,
    InvokeCommand,
    JsonValue,
    RemoveCommand,
    SettingsCommand,
    command_alert,
    command_css,
    command_data,
    command_insert,
    command_invoke,
    command_remove,
    command_settings,
)
from ajax_commands.core.domain.response_envelope import ResponseEnvelope
from ajax_commands.core.services.ajax_responder import AjaxResponder
from ajax_commands.core.services.callback_registry import (
    AjaxCallbackRegistry,
    ajax_callback_registry,
)

__all__ = [
    "COMMAND_BUILDERS",
    "COMMAND_KINDS",
    "INSERT_METHODS",
    "AjaxCallbackRegistry",
    "AjaxCommand",
    "AjaxResponder",
    "AlertCommand",
    "CssCommand",
    "DataCommand",
    "InsertCommand",
    "InvokeCommand",
    "JsonValue",
    "RemoveCommand",
    "ResponseEnvelope",
    "SettingsCommand",
    "ajax_callback_registry",
    "command_alert",
    "command_css",
    "command_data",
    "command_insert",
    "command_invoke",
    "command_remove",
    "command_settings",
]
