import logging
import os
from typing import Any, Literal, TypeGuard

try:
    from pythonjsonlogger.json import JsonFormatter
except ImportError:
    raise ImportError('Please install python-json-logger or dnspodlib with "log" to use this module')

from dnspodlib import SERVICE, __version__
from dnspodlib.decode import logger as dnspod_logger

LogFormat = Literal["json", "console"]

LOG_FORMAT_ENV = "DNSPODLIB_LOG_FORMAT"
# Passed with `extra=` by the decoder
CONTEXT_FIELDS = ("action", "request_id", "error_code")


class DnspodJsonFormatter(JsonFormatter):
    """One JSON object per line, stamped with the API service and the library version."""

    def __init__(self, version: str = __version__, **kwargs):
        self.version = version
        super().__init__("%(asctime)s %(levelname)s %(name)s %(message)s", **kwargs)

    def add_fields(self, log_data: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]):
        super().add_fields(log_data, record, message_dict)
        log_data.setdefault("service", SERVICE)
        log_data["version"] = self.version


class ConsoleFormatter(logging.Formatter):
    """Plain text line, with the request context appended when the record has one."""

    def __init__(self):
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = " ".join(
            f"{k}={getattr(record, k)}" for k in CONTEXT_FIELDS if getattr(record, k, None) is not None
        )
        return f"{line} ({context})" if context else line


def is_valid_log_format(log_format: str) -> TypeGuard[LogFormat]:
    return log_format in {"json", "console"}


def get_log_format(default: LogFormat = "console") -> LogFormat:
    """Log format from the DNSPODLIB_LOG_FORMAT environment variable."""
    log_format = os.environ.get(LOG_FORMAT_ENV, default)
    if not is_valid_log_format(log_format):
        raise ValueError(f"Invalid {LOG_FORMAT_ENV} {log_format!r}, expected 'json' or 'console'")
    return log_format


def init_logging(
    log_format: LogFormat | None = None,
    *,
    logger: logging.Logger = dnspod_logger,
    version: str = __version__,
    stream_handler: logging.StreamHandler | None = None,
) -> logging.StreamHandler:
    """
    Attach a handler to the dnspodlib logger (decode debug lines, provider errors).

    The format defaults to DNSPODLIB_LOG_FORMAT. Returns the handler so callers can remove it.
    """
    _log_format = log_format or get_log_format()
    if not is_valid_log_format(_log_format):
        raise ValueError(f"Invalid log format {_log_format!r}")

    _stream_handler = stream_handler or logging.StreamHandler()
    _stream_handler.setFormatter(DnspodJsonFormatter(version) if _log_format == "json" else ConsoleFormatter())
    logger.addHandler(_stream_handler)
    return _stream_handler
