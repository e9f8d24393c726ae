from __future__ import annotations

import logging
import warnings
from logging import NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

NAMESPACE = "FlowTransTest"


@pytest.fixture(autouse=True)
def fresh_logger_utils(monkeypatch: pytest.MonkeyPatch) -> Iterator[logging.Logger]:
    monkeypatch.setattr(LoggerUtils, "_LOGGER_NAMESPACE", NAMESPACE)
    monkeypatch.setattr(LoggerUtils, "_configured", False)
    monkeypatch.setattr(LoggerUtils, "_instance", None)
    monkeypatch.setattr(warnings, "showwarning", warnings.showwarning)
    namespace_logger = logging.getLogger(NAMESPACE)
    yield namespace_logger
    for handler in list(namespace_logger.handlers):
        handler.close()
        namespace_logger.removeHandler(handler)


def test_get_logger_uses_namespace() -> None:
    assert LoggerUtils.get_logger("core.plugin").name == f"{NAMESPACE}.core.plugin"
    assert LoggerUtils.get_logger().name == NAMESPACE


def test_handlers_attached_once(tmp_path: Path, fresh_logger_utils: logging.Logger) -> None:
    first = LoggerUtils(tmp_path / "flowtrans.log")
    second = LoggerUtils(tmp_path / "other.log")

    assert first is second
    handler_types = [type(handler) for handler in fresh_logger_utils.handlers]
    assert handler_types.count(RotatingFileHandler) == 1
    assert handler_types.count(StreamHandler) == 1


def test_console_writes_warnings_to_stderr(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    LoggerUtils(tmp_path / "flowtrans.log")
    logger = LoggerUtils.get_logger("test")

    logger.info("quiet")
    logger.warning("loud")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "loud" in captured.err
    assert "quiet" not in captured.err


def test_file_receives_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "flowtrans.log"
    LoggerUtils(log_file, use_null_console=True)
    LoggerUtils.enable_debug(True)

    LoggerUtils.get_logger("test").debug("detail")
    for handler in logging.getLogger(NAMESPACE).handlers:
        handler.flush()

    assert "detail" in log_file.read_text(encoding="utf-8")


def test_null_console_and_no_file(fresh_logger_utils: logging.Logger) -> None:
    LoggerUtils("", use_null_console=True)
    assert [type(handler) for handler in fresh_logger_utils.handlers] == [NullHandler]


def test_set_level(fresh_logger_utils: logging.Logger) -> None:
    LoggerUtils.set_level("ERROR")
    assert fresh_logger_utils.level == logging.ERROR
    LoggerUtils.set_level("LOUD")  # type: ignore[arg-type]
    assert fresh_logger_utils.level == logging.INFO
    LoggerUtils.enable_debug(False)
    assert fresh_logger_utils.level == logging.INFO
