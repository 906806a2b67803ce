import uuid
import logging
import json
from typing import Optional
from contextvars import ContextVar
from datetime import datetime, timezone

# Context variable holding the id of the command execution in flight
request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'taskName', 'message', 'request_id',
])


class RequestIdFormatter(logging.Formatter):
    """Formatter that adds the current request id to log records."""

    def format(self, record):
        record.request_id = request_id_var.get() or "no-request-id"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """Formatter that outputs logs in JSON format."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": request_id_var.get() or "no-request-id",
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Add any extra fields
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def set_request_id(request_id: str):
    """Bind a request id to the current context and return the reset token."""
    return request_id_var.set(request_id)


def reset_request_id(token) -> None:
    request_id_var.reset(token)


def generate_request_id() -> str:
    return str(uuid.uuid4())


class StructuredLogger:
    """Structured logger passing keyword arguments as record extras."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, **kwargs):
        if not self.logger.isEnabledFor(level):
            return
        extra = {k: v for k, v in kwargs.items() if k != 'exc_info'}
        self.logger.log(level, message, extra=extra, exc_info=kwargs.get('exc_info'))

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)


def setup_logging(use_json: bool = False, level: int = logging.INFO):
    """Attach a stream handler to the ``tmdb_api`` logger.

    Applications embedding the client usually configure logging themselves;
    this is meant for scripts and debugging sessions.
    """
    package_logger = logging.getLogger("tmdb_api")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()

    if use_json:
        formatter = JSONFormatter()
    else:
        formatter = RequestIdFormatter(
            '%(asctime)s - %(request_id)s - %(name)s - %(levelname)s - %(message)s'
        )

    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def get_structured_logger(name: str) -> StructuredLogger:
    return StructuredLogger(name)
