import pytest

from ajax_commands.core.common.exceptions import CallbackNotFoundError
from ajax_commands.core.domain.commands import command_alert
from ajax_commands.core.services.callback_registry import AjaxCallbackRegistry


@pytest.fixture
def registry() -> AjaxCallbackRegistry:
    return AjaxCallbackRegistry()


def test_register_and_get(registry: AjaxCallbackRegistry) -> None:
    def greet(payload):
        return [command_alert("hi")]

    registry.register("greet", greet)

    assert registry.has("greet")
    assert registry.get("greet") is greet
    assert registry.names() == ["greet"]


def test_decorator_registers_and_returns_function(
    registry: AjaxCallbackRegistry,
) -> None:
    @registry.callback("refresh")
    def refresh(payload):
        return None

    assert registry.get("refresh") is refresh
    assert refresh({}) is None


def test_duplicate_names_are_rejected(registry: AjaxCallbackRegistry) -> None:
    registry.register("greet", lambda payload: [])

    with pytest.raises(ValueError, match="already registered"):
        registry.register("greet", lambda payload: [])


@pytest.mark.parametrize("name", ["", None, 5])
def test_invalid_names_are_rejected(registry: AjaxCallbackRegistry, name) -> None:
    with pytest.raises(ValueError):
        registry.register(name, lambda payload: [])  # type: ignore[arg-type]


def test_non_callable_is_rejected(registry: AjaxCallbackRegistry) -> None:
    with pytest.raises(TypeError):
        registry.register("greet", "not callable")  # type: ignore[arg-type]


def test_unknown_callback_raises_not_found(registry: AjaxCallbackRegistry) -> None:
    with pytest.raises(CallbackNotFoundError) as exc_info:
        registry.get("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.callback_name == "missing"
    assert "missing" in exc_info.value.message
    assert not registry.has("missing")
