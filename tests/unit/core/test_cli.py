from pathlib import Path
from unittest.mock import patch

import pytest

from ajax_commands.core import cli
from ajax_commands.core.config.app_config import LogLevel


@pytest.fixture(autouse=True)
def _clean_ajax_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "AJAX_HOST",
        "AJAX_PORT",
        "AJAX_ROUTE_PREFIX",
        "AJAX_LOG_LEVEL",
        "AJAX_LOG_FILE",
        "AJAX_JSON_ENSURE_ASCII",
        "AJAX_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)


def test_cli_defaults() -> None:
    args = cli.parse_cli_args([])
    cfg = cli.apply_cli_args(args)

    assert cfg.host == "127.0.0.1"
    assert cfg.port == 8000
    assert args.callback_modules == []


def test_cli_overrides_config_file(temp_config_path: Path) -> None:
    args = cli.parse_cli_args(
        [
            "--config",
            str(temp_config_path),
            "--port",
            "9200",
            "--route-prefix",
            "cb/",
            "--log-level",
            "debug",
        ]
    )
    cfg = cli.apply_cli_args(args)

    assert cfg.host == "0.0.0.0"
    assert cfg.port == 9200
    assert cfg.route_prefix == "/cb"
    assert cfg.logging.level is LogLevel.DEBUG


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.parse_cli_args(["--log-level", "chatty"])


def test_main_builds_app_and_runs_uvicorn() -> None:
    built = []

    def fake_build_app(cfg):
        built.append(cfg)
        return "app"

    with patch.object(cli.uvicorn, "run") as run, patch.object(
        cli, "configure_logging_with_environment_tagging"
    ) as configure:
        cli.main(["--host", "0.0.0.0", "--port", "8123"], build_app_fn=fake_build_app)

    assert built[0].port == 8123
    configure.assert_called_once_with(level="INFO", log_file=None)
    run.assert_called_once_with("app", host="0.0.0.0", port=8123, log_config=None)


def test_main_imports_callback_modules() -> None:
    with patch.object(cli.uvicorn, "run"), patch.object(
        cli, "configure_logging_with_environment_tagging"
    ), patch.object(cli.importlib, "import_module") as import_module:
        cli.main(["--callbacks", "myapp.ajax"], build_app_fn=lambda cfg: "app")

    import_module.assert_called_once_with("myapp.ajax")
