"""Logging helpers shared by the extractor modules."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Union

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ROOT_LOGGER_NAME = "workflow_extractor"

_loggers: Dict[str, logging.Logger] = {}


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[Path, str]] = None,
    console: bool = True,
) -> None:
    """Configure the package logger. Safe to call more than once."""
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for the given module name."""
    if name.startswith(ROOT_LOGGER_NAME):
        logger_name = name
    else:
        logger_name = f"{ROOT_LOGGER_NAME}.{name}"

    if logger_name not in _loggers:
        _loggers[logger_name] = logging.getLogger(logger_name)
    return _loggers[logger_name]
