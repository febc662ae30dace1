"""
Logging setup shared by the site build and the static server.
"""
from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
    'RESET': '\033[0m',
    'DIM': '\033[2m',
}

ROOT_LOGGER = "brightsmile"


class ColoredFormatter(logging.Formatter):
    """Console formatter with ANSI colours"""

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime('%H:%M:%S')
        level = record.levelname
        message = record.getMessage()

        if self.use_colors:
            color = COLORS.get(level, '')
            reset = COLORS['RESET']
            dim = COLORS['DIM']
            return f"{dim}{timestamp}{reset} {color}[{level[:4]}]{reset} {dim}({record.name}){reset} {message}"
        return f"{timestamp} [{level[:4]}] ({record.name}) {message}"


class FileFormatter(logging.Formatter):
    """Plain formatter for log files, tracebacks included"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        line = f"{timestamp} [{record.levelname}] ({record.name}) {record.getMessage()}"
        if record.exc_info:
            return f"{line}\n{self.formatException(record.exc_info)}"
        return line


_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(
    name: str = ROOT_LOGGER,
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    console_output: bool = True,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Configure and return the logger called *name*

    Existing handlers are replaced so repeated calls do not duplicate output.
    """
    numeric_level = _coerce_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(use_colors and sys.stdout.isatty()))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(FileFormatter())
        logger.addHandler(file_handler)

    logger.propagate = False
    _loggers[name] = logger
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a configured logger, a child of a configured one, or a fresh one"""
    if name in _loggers:
        return _loggers[name]

    parts = name.split('.')
    if len(parts) > 1:
        parent_name = '.'.join(parts[:-1])
        if parent_name in _loggers:
            child_logger = _loggers[parent_name].getChild(parts[-1])
            _loggers[name] = child_logger
            return child_logger

    return setup_logger(name)
