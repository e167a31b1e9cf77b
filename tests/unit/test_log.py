"""
Тесты для настройки логирования
"""

import importlib
import logging

import pytest

from src.utils import log


@pytest.fixture
def fresh_root_logger(monkeypatch: pytest.MonkeyPatch):
    """Чистое состояние root logger; исходные обработчики восстанавливаются"""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(log, "_LOGGER_CONFIGURED", False)

    yield root

    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(saved_level)


class TestSetupLogging:
    """Тесты для setup_logging"""

    def test_console_only(self, fresh_root_logger: logging.Logger) -> None:
        before = len(fresh_root_logger.handlers)

        log.setup_logging(logging.DEBUG)

        assert fresh_root_logger.level == logging.DEBUG
        assert len(fresh_root_logger.handlers) == before + 1

    def test_idempotent(self, fresh_root_logger: logging.Logger) -> None:
        log.setup_logging()
        count = len(fresh_root_logger.handlers)

        log.setup_logging()

        assert len(fresh_root_logger.handlers) == count

    def test_file_handler(self, fresh_root_logger: logging.Logger, tmp_path) -> None:
        log.setup_logging(logging.INFO, log_dir=tmp_path / "logs")
        log.get_logger("src.test").info("hello canvas")

        for handler in fresh_root_logger.handlers:
            handler.flush()

        text = (tmp_path / "logs" / log.LOG_FILE_NAME).read_text(encoding="utf-8")
        assert "hello canvas" in text


def test_get_logger_returns_named_logger() -> None:
    assert log.get_logger("src.core.io.ppm") is logging.getLogger("src.core.io.ppm")


@pytest.mark.parametrize(
    "module_name",
    ["src.core.domain.canvas", "src.core.io.ppm", "src.demo.projectile", "src.demo.cli"],
)
def test_module_loggers_named_after_module(module_name: str) -> None:
    """Логгеры модулей берутся через get_logger(__name__)"""
    module = importlib.import_module(module_name)

    assert module.logger is log.get_logger(module_name)
