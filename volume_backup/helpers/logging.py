################################################################################
# DOCKER-VOLUME-BACKUP
#
# @file:        logging.py
# @module:      volume_backup.helpers.logging
# @description: Logger factory, console logging setup, and the per-run log file.
# @author:      Markus F. (TZERO78) & Contributors
# @repository:  https://github.com/TZERO78/docker-volume-backup
# @version:     1.2.0
#
# ------------------------------------------------------------------------------
# Copyright (c) 2025 Markus F. (TZERO78)
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
# ==============================================================================
# Hinweise:
# - get_logger() is the only way modules obtain a logger
# - RunLog mirrors every user-visible event into <log_dir>/volume_backup_<ts>.log
# - SUCCESS and SECTION are registered as extra levels for the run log
################################################################################

"""
Logging helpers for docker-volume-backup.

Module loggers are plain stdlib loggers below the ``volume_backup`` namespace.
The run log is a separate, non-propagating logger with a single file handler
that writes ``[<iso8601>] LEVEL: message`` lines.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from .constants import (
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    PRIVATE_DIR_MODE,
    RUN_LOG_FORMAT,
    RUN_LOGGER_NAME,
)
from . import ui_utils

SECTION = 21
SUCCESS = 25

logging.addLevelName(SECTION, "SECTION")
logging.addLevelName(SUCCESS, "SUCCESS")


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)


def setup_logging(debug: bool = False) -> None:
    """
    Configure stderr logging for the package namespace.

    Args:
        debug: Show DEBUG records (docker commands, raw stderr)
    """
    root = logging.getLogger("volume_backup")
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not any(getattr(h, "_volume_backup_console", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        handler._volume_backup_console = True
        root.addHandler(handler)


class IsoFormatter(logging.Formatter):
    """Formatter that renders asctime as local ISO 8601 with offset."""

    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")


class RunLog:
    """
    Console + file event sink for one backup run.

    Every call prints a rich, severity-coded line and appends the same
    message to the run log file.
    """

    def __init__(self, log_file: Path):
        self.log_file = Path(log_file)
        self._logger = logging.getLogger(f"{RUN_LOGGER_NAME}.{self.log_file.stem}")
        self._handler: Optional[logging.FileHandler] = None

    def __enter__(self) -> RunLog:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self, header: Iterable[str] = ()) -> None:
        """Create the log directory (0700) and attach the file handler."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.parent.chmod(PRIVATE_DIR_MODE)

        header = list(header)
        if header:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write("\n".join(header) + "\n")

        handler = logging.FileHandler(self.log_file, encoding="utf-8")
        handler.setFormatter(IsoFormatter(RUN_LOG_FORMAT))
        handler.setLevel(logging.DEBUG)
        self.log_file.chmod(0o600)

        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        self._logger.addHandler(handler)
        self._handler = handler

    def close(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None

    # --------------- Events ---------------

    def error(self, message: str) -> None:
        ui_utils.print_error(message)
        self._logger.error(message)

    def success(self, message: str) -> None:
        ui_utils.print_success(message)
        self._logger.log(SUCCESS, message)

    def warning(self, message: str) -> None:
        ui_utils.print_warning(message)
        self._logger.warning(message)

    def info(self, message: str) -> None:
        ui_utils.print_info(message)
        self._logger.info(message)

    def plain(self, message: str) -> None:
        ui_utils.print_plain(message)
        self._logger.info(message.strip())

    def section(self, title: str) -> None:
        ui_utils.print_divider(title)
        self._logger.log(SECTION, title)

    def detail(self, message: str) -> None:
        """File-only record, e.g. raw docker stderr."""
        if message:
            self._logger.debug(message.rstrip())
