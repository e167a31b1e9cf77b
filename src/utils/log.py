"""
Logging — централизованная настройка логирования

Библиотечный код получает логгер через get_logger(__name__) и пишет только
DEBUG. Обработчики настраивает внешний потребитель (CLI) один раз через
setup_logging.
"""

import logging
import os
from pathlib import Path

_LOGGER_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "raytracer.log"


def setup_logging(
    level: int = logging.INFO,
    log_dir: str | os.PathLike | None = None,
) -> None:
    """
    Настройка логирования: консоль + (опционально) файл.

    Повторный вызов ничего не делает.

    Args:
        level: Уровень логирования (default: INFO)
        log_dir: Каталог для файла raytracer.log (None: только консоль)
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    logger = logging.getLogger()
    logger.setLevel(level)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Консоль
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Файл
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
        except OSError as e:
            logging.getLogger(__name__).warning("Could not open log file in %s: %s", log_dir, e)

    _LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
