"""Настройка журнала: прогресс генерации в stdout и, по желанию, в файл.

Принципы:
- SRP: модуль только настраивает обработчики; сервисы берут логгер через `get_logger`.
- Консоль получает голые сообщения, файл — записи с UTC-временем.
"""
from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "wallpaper"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class UtcFormatter(logging.Formatter):
    """Время записи в UTC, ISO-8601 с суффиксом Z."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return stamp.strftime(datefmt or "%Y-%m-%dT%H:%M:%SZ")


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> Logger:
    """Настраивает логгер приложения.

    Args:
        level: Уровень журнала.
        log_file: Путь к файлу журнала с ротацией; `None` — только stdout.
        max_bytes: Размер файла до ротации.
        backup_count: Сколько старых файлов хранить.

    Returns:
        Логгер `wallpaper`.
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    app_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(UtcFormatter(FILE_FORMAT))
        app_logger.addHandler(file_handler)

    app_logger.debug("Logging configured (level=%s, file=%s)", logging.getLevelName(level), log_file)
    return app_logger


def get_logger(name: str) -> Logger:
    """Дочерний логгер, например `wallpaper.generator`."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
