"""
Logging setup for record_deduper

All loggers live under the "record_deduper" namespace. Records go to stdout
and, optionally, to a log file, either as plain text or as one JSON object
per line.
"""
import json
import logging
import sys
from typing import List, Optional

from record_deduper.common.exceptions import ConfigurationError

ROOT_LOGGER = "record_deduper"

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class JsonFormatter(logging.Formatter):
    """Render each log record as a single JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': self.formatTime(record),
            'level': record.levelname,
            'module': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exception'] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    if format_type == "text":
        return logging.Formatter(TEXT_FORMAT)
    raise ConfigurationError(f"Unknown log format: {format_type!r} (use 'text' or 'json')")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    format_type: str = "text"
) -> logging.Logger:
    """
    Configure the package logger

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to log to as well as stdout
        format_type: 'text' or 'json'

    Returns:
        The "record_deduper" logger

    Raises:
        ConfigurationError: For an unknown level or format
    """
    level_name = str(level).upper()
    if level_name not in LEVELS:
        raise ConfigurationError(f"Unknown log level: {level!r}")
    formatter = _formatter(format_type)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level_name)
    logger.handlers = []
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a class or module, nested under the package logger"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
