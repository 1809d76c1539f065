"""Event log of the chat server, written to a file."""

from __future__ import annotations

import logging
import os
import sys

LOG_FILE = "server.log"
DEFAULT_LOGGER_NAME = "file_logger"


class _LowerLevelFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        record.level_lower = record.levelname.lower()
        return super().format(record)


class EventLogger:
    """Writes server events to a log file; loggers are shared by name."""

    def __init__(
        self,
        path: str | os.PathLike[str] = LOG_FILE,
        name: str = DEFAULT_LOGGER_NAME,
    ) -> None:
        self._logger = logging.getLogger(name)
        if self._logger.handlers:
            return
        try:
            handler = logging.FileHandler(path, encoding="utf-8")
        except OSError as exc:
            print(f"Log initialization failed: {exc}", file=sys.stderr)
            self._logger.addHandler(logging.NullHandler())
            return
        handler.setFormatter(
            _LowerLevelFormatter(
                "%(asctime)s %(name)s [%(level_lower)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        self._logger.addHandler(handler)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._logger.info("LOGGER INITIALIZED AND STARTED")

    def log_message(self, message: str) -> None:
        self._logger.info("Received message: %s", message)

    def log_error(self, message: str) -> None:
        self._logger.error("Error occurred: %s", message)

    def log_event(self, message: str) -> None:
        self._logger.info("%s", message)