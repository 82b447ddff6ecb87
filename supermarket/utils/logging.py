"""
supermarket/utils/logging.py
───────────────────────────
Configures structured logging for the checkout service.
"""
import os
import logging
from logging.handlers import RotatingFileHandler
from flask import has_request_context, request


class RequestFormatter(logging.Formatter):
    """
    Custom formatter that injects request info (IP, URL)
    into logs if a request context is available.
    """
    def format(self, record):
        if has_request_context():
            record.url = request.url
            record.remote_addr = request.remote_addr
        else:
            record.url = None
            record.remote_addr = None
        return super().format(record)


def setup_logging(app):
    """
    Configure rotating file logging: logs/app.log
    Max size: 5MB
    Backup count: 5 files
    Format: timestamp | level | module | message

    app.logger is the `supermarket` logger, so domain modules logging via
    `logging.getLogger(__name__)` propagate into these handlers.
    """
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO

    handlers = []

    # 1. File Logger (skipped when the filesystem is read-only)
    if app.config.get('LOG_TO_FILE', True):
        try:
            log_dir = os.path.join(app.root_path, '..', 'logs')
            os.makedirs(log_dir, exist_ok=True)

            file_handler = RotatingFileHandler(
                os.path.join(log_dir, 'app.log'),
                maxBytes=5 * 1024 * 1024,
                backupCount=5
            )
            file_handler.setFormatter(RequestFormatter(
                '%(asctime)s | %(levelname)s | %(name)s | %(remote_addr)s | %(url)s | %(message)s'
            ))
            file_handler.setLevel(level)
            handlers.append(file_handler)
        except OSError:
            app.logger.warning("File logging disabled: log directory is not writable")

    # 2. Stdout Logger (Critical for container/cloud logs)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)s | %(message)s'
    ))
    stream_handler.setLevel(level)
    handlers.append(stream_handler)

    # create_app may run many times in one process (tests)
    for handler in list(app.logger.handlers):
        app.logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        app.logger.addHandler(handler)
    app.logger.setLevel(level)

    app.logger.info("Supermarket checkout service startup")
