"""
Logging setup for Respire.

The 'respire' logger always writes to the console. With a log directory it
also writes to a size-rotated file. JSON lines are available for log
shippers.
"""

import json
import logging
import logging.handlers
import os
from typing import Optional

LOGGER_NAME = 'respire'
LOG_FILE_NAME = 'respire.log'
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

TEXT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s.%(module)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'time': self.formatTime(record, DATE_FORMAT),
            'level': record.levelname,
            'logger': record.name,
            'module': record.module,
            'message': record.getMessage(),
        }
        if record.exc_info:
            payload['exc_info'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonLineFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the 'respire' logger and return it.

    Calling this again replaces the handlers, so each app created by the
    factory (one per test, for instance) starts clean.
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _build_formatter(json_format)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        rotating = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        rotating.setFormatter(formatter)
        logger.addHandler(rotating)

    if app is not None:
        # Request lines are noise next to the engine's own messages.
        logging.getLogger('werkzeug').setLevel(logging.WARNING)
        app.logger.setLevel(level)

    logger.debug("Logging configured: level=%s dir=%s json=%s", log_level, log_dir or '-', json_format)
    return logger
