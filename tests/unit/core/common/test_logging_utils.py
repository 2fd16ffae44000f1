import logging

import pytest

from ajax_commands.core.common.logging_utils import (
    EnvironmentTaggingFilter,
    EnvironmentTaggingFormatter,
    LogContext,
    configure_logging_with_environment_tagging,
    get_logger,
)


def test_environment_tag_is_test_under_pytest() -> None:
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert EnvironmentTaggingFilter().filter(record) is True
    assert record.env_tag == "test"


def test_formatter_includes_environment_tag() -> None:
    record = logging.LogRecord("ajax", logging.WARNING, __file__, 7, "hello", None, None)
    record.env_tag = "test"

    formatted = EnvironmentTaggingFormatter().format(record)

    assert "[test]" in formatted
    assert "ajax:7 hello" in formatted


def test_configure_accepts_level_names() -> None:
    configure_logging_with_environment_tagging(level="debug")
    assert logging.getLogger().level == logging.DEBUG

    configure_logging_with_environment_tagging(level="nonsense")
    assert logging.getLogger().level == logging.INFO


def test_configure_writes_log_file(tmp_path) -> None:
    log_file = tmp_path / "ajax.log"
    configure_logging_with_environment_tagging(level=logging.INFO, log_file=str(log_file))

    logging.getLogger("ajax_commands.test").info("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "written to file" in content
    assert "[test]" in content


def test_log_context_binds_and_releases() -> None:
    context = LogContext(get_logger("ajax_commands.test"), callback="greet")

    with context as bound:
        assert context.get_logger() is bound

    with pytest.raises(RuntimeError):
        context.get_logger()
