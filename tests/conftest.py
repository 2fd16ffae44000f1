import contextlib
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ajax_commands.core.app.application_factory import build_app
from ajax_commands.core.config.app_config import AppConfig
from ajax_commands.core.domain.commands import command_alert, command_remove
from ajax_commands.core.services.callback_registry import AjaxCallbackRegistry


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    env = {
        "AJAX_HOST": "localhost",
        "AJAX_PORT": "9000",
        "AJAX_ROUTE_PREFIX": "/callbacks/",
        "AJAX_LOG_LEVEL": "debug",
        "AJAX_JSON_ENSURE_ASCII": "false",
    }
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    return env


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    import yaml

    cfg = {
        "host": "0.0.0.0",
        "port": 8080,
        "route_prefix": "site/ajax",
        "logging": {"level": "WARNING"},
    }
    p = tmp_path / "ajax.config.yaml"
    with p.open("w", encoding="utf-8") as f:
        yaml.safe_dump(cfg, f, sort_keys=False)
    return p


@pytest.fixture
def callback_registry() -> AjaxCallbackRegistry:
    """A registry with a few callbacks covering each response shape."""
    registry = AjaxCallbackRegistry()

    @registry.callback("greet")
    def greet(payload):
        return [command_alert(f"Hello {payload.get('name', 'there')}")]

    @registry.callback("cleanup")
    def cleanup(payload):
        return [command_remove("#box")]

    @registry.callback("nothing")
    def nothing(payload):
        return []

    @registry.callback("header-only")
    def header_only(payload):
        return None

    @registry.callback("slow")
    async def slow(payload):
        return [command_alert("done")]

    @registry.callback("broken")
    def broken(payload):
        raise RuntimeError("boom")

    return registry


@pytest.fixture
def test_client(callback_registry: AjaxCallbackRegistry) -> Iterator[TestClient]:
    """A TestClient over an app serving the fixture callbacks."""
    app = build_app(AppConfig(), registry=callback_registry)
    client = TestClient(app)
    try:
        yield client
    finally:
        with contextlib.suppress(Exception):
            client.close()
