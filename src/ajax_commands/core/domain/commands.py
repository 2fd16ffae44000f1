"""
Ajax command domain models and builders.

Server-side logic answers an Ajax request with a list of commands. The list
is converted to a JSON array and returned to the browser, which walks it in
order and dispatches each object on its ``command`` key, much like a small
macro language:

    commands = [
        # Merge into the client-side settings object.
        command_settings({"foo": "bar"}),
        # Remove the 'disabled' attribute from '#object-1'.
        command_invoke("#object-1", "removeAttr", ["disabled"]),
        # Insert HTML content into '#object-1'.
        command_insert("#object-1", "html", "some html content"),
    ]
    AjaxResponder().response(commands)

Builders capture their arguments as given and never fail.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal, Union

from pydantic import Field, model_validator

from ajax_commands.core.constants import (
    COMMAND_ALERT,
    COMMAND_CSS,
    COMMAND_DATA,
    COMMAND_INSERT,
    COMMAND_INVOKE,
    COMMAND_REMOVE,
    COMMAND_SETTINGS,
)
from ajax_commands.core.domain.base import ValueObject

JsonValue = Union[
    str, int, float, bool, None, Sequence["JsonValue"], Mapping[str, "JsonValue"]
]

# Lets command_invoke tell an omitted argument list from an explicit None
_NO_ARGUMENTS: Any = object()


def _snapshot(value: Any) -> Any:
    """Deep copy a field value so later caller mutations don't leak in."""
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        # Values that refuse copying (locks, generators) are kept by reference
        return value


class AjaxCommand(ValueObject):
    """Base class for commands sent to the client-side interpreter.

    Subclasses declare ``command`` first so it leads the serialized object.
    Field values are copied on construction, so a built command does not
    change when the caller later mutates the dicts or lists it passed in.
    """

    @model_validator(mode="before")
    @classmethod
    def _copy_field_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: _snapshot(value) for key, value in data.items()}
        return data

    def __getitem__(self, key: str) -> Any:
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)


class AlertCommand(AjaxCommand):
    """Display a JavaScript alert dialog box."""

    command: Literal["alert"] = "alert"
    text: Any


class InsertCommand(AjaxCommand):
    """Insert HTML relative to the target using a DOM manipulation method."""

    command: Literal["insert"] = "insert"
    method: Any
    target: Any
    data: Any


class RemoveCommand(AjaxCommand):
    """Remove every element matched by the target, and everything within."""

    command: Literal["remove"] = "remove"
    target: Any


class CssCommand(AjaxCommand):
    """Apply CSS properties to the elements matched by the target."""

    command: Literal["css"] = "css"
    target: Any
    argument: Any


class SettingsCommand(AjaxCommand):
    """Extend the client-side settings object.

    The client merges these values into its existing settings rather than
    replacing them; later commands use the merged settings.
    """

    command: Literal["settings"] = "settings"
    settings: Any


class DataCommand(AjaxCommand):
    """Attach a name/value pair to the target's data cache."""

    command: Literal["data"] = "data"
    target: Any
    name: Any
    value: Any


class InvokeCommand(AjaxCommand):
    """Invoke a client-side method on the elements matched by the target.

    Intended for simple calls such as attr(), addClass(), removeClass()
    or toggleClass().
    """

    command: Literal["invoke"] = "invoke"
    target: Any
    method: Any
    arguments: Any = Field(default_factory=list)


def command_alert(text: Any) -> AlertCommand:
    """Create an 'alert' command.

    Args:
        text: The message string to display to the user

    Returns:
        A command suitable for ``AjaxResponder.render()``
    """
    return AlertCommand(text=text)


def command_insert(target: Any, method: Any, html: Any) -> InsertCommand:
    """Create an 'insert' command.

    Args:
        target: A selector string for the element(s) to update
        method: DOM manipulation method, one of ``INSERT_METHODS``
            (replaceWith, append, prepend, before, after, html)
        html: The markup passed to the method

    Returns:
        A command suitable for ``AjaxResponder.render()``
    """
    return InsertCommand(method=method, target=target, data=html)


def command_remove(target: Any) -> RemoveCommand:
    """Create a 'remove' command for the elements matched by ``target``."""
    return RemoveCommand(target=target)


def command_css(target: Any, argument: Any) -> CssCommand:
    """Create a 'css' command.

    Args:
        target: A selector string
        argument: Mapping of CSS property names to values

    Returns:
        A command suitable for ``AjaxResponder.render()``
    """
    return CssCommand(target=target, argument=argument)


def command_settings(settings: Any) -> SettingsCommand:
    """Create a 'settings' command merging ``settings`` into the client settings."""
    return SettingsCommand(settings=settings)


def command_data(target: Any, name: Any, value: Any) -> DataCommand:
    """Create a 'data' command.

    Args:
        target: A selector string
        name: The key of the data attached to the target
        value: The value of the data; any JSON-compatible type

    Returns:
        A command suitable for ``AjaxResponder.render()``
    """
    return DataCommand(target=target, name=name, value=value)


def command_invoke(
    target: Any, method: Any, arguments: Any = _NO_ARGUMENTS
) -> InvokeCommand:
    """Create an 'invoke' command.

    Args:
        target: A selector string
        method: The client-side method to invoke
        arguments: Arguments for the method, stored as given; an empty
            list when omitted

    Returns:
        A command suitable for ``AjaxResponder.render()``
    """
    if arguments is _NO_ARGUMENTS:
        arguments = []
    return InvokeCommand(target=target, method=method, arguments=arguments)


COMMAND_BUILDERS: Mapping[str, Callable[..., AjaxCommand]] = {
    COMMAND_ALERT: command_alert,
    COMMAND_INSERT: command_insert,
    COMMAND_REMOVE: command_remove,
    COMMAND_CSS: command_css,
    COMMAND_SETTINGS: command_settings,
    COMMAND_DATA: command_data,
    COMMAND_INVOKE: command_invoke,
}
