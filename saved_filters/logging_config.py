"""
Structured logging configuration.

Called once from create_app(). Supports text (human-readable) and JSON formats
via LOG_FORMAT env var. LOG_LEVEL defaults to INFO. Records logged while a
request is being handled carry the acting user code and the request line, so
a refused removal or a rolled-back save can be traced to who asked for it.
"""
import json
import logging
import os
import sys
from datetime import datetime, timezone

from flask import has_request_context, request, session

NO_CONTEXT = '-'

TEXT_FORMAT = '[%(asctime)s] %(levelname)s %(name)s [%(user)s %(method)s %(path)s] %(message)s'


class RequestContextFilter(logging.Filter):
    """Stamp user, method and path onto every record; '-' outside a request."""

    def filter(self, record):
        if has_request_context():
            record.user = session.get('user_code') or NO_CONTEXT
            record.method = request.method
            record.path = request.path
        else:
            record.user = record.method = record.path = NO_CONTEXT
        return True


class JSONFormatter(logging.Formatter):
    """Single-line JSON log formatter for production log aggregators."""

    def format(self, record):
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key in ('user', 'method', 'path'):
            value = getattr(record, key, NO_CONTEXT)
            if value != NO_CONTEXT:
                entry[key] = value
        if record.exc_info and record.exc_info[0] is not None:
            entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(entry)


# Third-party loggers that are noisy at INFO
_NOISY_LOGGERS = [
    'sqlalchemy.engine',
    'werkzeug',
    'alembic',
]


def _level_from_env():
    level = getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(app=None):
    """
    Set up root logger with format/level from env vars.

    Environment variables:
        LOG_LEVEL  - Python log level name (default: INFO)
        LOG_FORMAT - "text" (default) or "json"
    """
    level = _level_from_env()
    log_format = os.getenv('LOG_FORMAT', 'text').lower()

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(RequestContextFilter())

    if log_format == 'json':
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))

    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if app is not None:
        app.logger.debug("Logging configured: level=%s format=%s", logging.getLevelName(level), log_format)
