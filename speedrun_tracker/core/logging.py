from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.paths import get_logs_dir

LOGGER_NAME = "speedrun_tracker"


class LogEmitter(QObject):
    log_message = Signal(str)


class QtSignalLogHandler(logging.Handler):
    def __init__(self, emitter: LogEmitter) -> None:
        super().__init__()
        self._emitter = emitter

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._emitter.log_message.emit(message)
        except Exception:
            self.handleError(record)


def get_log_file_path(logs_dir: Path | None = None) -> Path:
    return (logs_dir or get_logs_dir()) / "analysis.log"


def setup_logging(debug: bool = False, logs_dir: Path | None = None) -> tuple[logging.Logger, LogEmitter]:
    log_file = get_log_file_path(logs_dir)
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    emitter = LogEmitter()
    signal_handler = QtSignalLogHandler(emitter)
    signal_handler.setFormatter(formatter)
    signal_handler.setLevel(level)

    logger.addHandler(file_handler)
    logger.addHandler(signal_handler)

    return logger, emitter
