# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Logging setup utilities for the bookshelf API."""

from __future__ import annotations

import logging
import os
import warnings
from pathlib import Path

LOGGER_NAME = 'bookshelf'
DEFAULT_LOG_PATH = Path(__file__).resolve().parent.parent.parent / 'data' / 'output'


def _get_log_level(arg_log_level: str | None = None) -> int:
    """Get log level from argument or environment variable."""
    if arg_log_level:
        return logging.getLevelName(arg_log_level.upper())

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    return logging.getLevelName(log_level)


def setup_logging(log_level: str | None = None, log_path: Path | None = None) -> logging.Logger:
    """Set up the bookshelf logger with an optional file handler.

    Records always propagate to the root logger (console, see `main.settings_log`).
    A file handler writing `bookshelf.log` is added unless `LOG_TO_FILE=false`.
    """
    level = _get_log_level(log_level)
    log_path = log_path or DEFAULT_LOG_PATH

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = True

    # Clear existing handlers to prevent duplicates
    if logger.hasHandlers():
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    if os.environ.get('LOG_TO_FILE', 'true').lower() == 'false':
        return logger

    try:
        log_path.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        warnings.warn(f'Cannot create log directory "{log_path}": {error}', stacklevel=2)
        return logger

    log_file_path = log_path / 'bookshelf.log'
    try:
        file_handler = logging.FileHandler(str(log_file_path), encoding='utf-8')
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
    except (OSError, PermissionError) as error:
        warnings.warn(f'Cannot create log file "{log_file_path}": {error}', stacklevel=2)

    return logger
