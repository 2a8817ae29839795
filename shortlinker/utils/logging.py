"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the lambda handler's `__init__.py` file
before any other logging is done.

Logging format (one JSON object per line on stdout):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "shortlinker.lambdas.shorten_url.app",
    "message": "Short link created. Responding with 201.",
    "service": "shortlinker",
    "id": "zxcvb"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlinker.utils.constants import ENV


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras and formatted tracebacks"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'message',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def __init__(self, service: str | None = None):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if self.service:
            log['service'] = self.service

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # Extras may carry exceptions, enums, datetimes... stringify them
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                    'service': os.getenv(ENV.App.APP_NAME),
                }
            },
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stdout'],
            },
        }
    )
