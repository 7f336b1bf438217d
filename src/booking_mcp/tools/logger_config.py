import inspect
import logging
import json
import os
import time
import traceback
from datetime import datetime
from functools import wraps
from typing import Any

CONTEXT_FIELDS = (
    "destination",
    "operation",
    "duration_ms",
    "status_code",
    "result_count",
    "uri",
    "tool",
    "method",
    "path",
    "error_type",
    "error_details",
)


class StructuredFormatter(logging.Formatter):
    """JSON formatter so request logs can be shipped as-is."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }
        return json.dumps(payload, ensure_ascii=False, default=str)


class StructuredLogger:
    """Thin wrapper that turns keyword arguments into record extras."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log_with_context(self, level: int, message: str, exc_info: bool = False, **context: Any) -> None:
        extra = {k: v for k, v in context.items() if v is not None}
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def info(self, message: str, **context: Any) -> None:
        self._log_with_context(logging.INFO, message, **context)

    def debug(self, message: str, **context: Any) -> None:
        self._log_with_context(logging.DEBUG, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log_with_context(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log_with_context(logging.ERROR, message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._log_with_context(logging.ERROR, message, exc_info=True, **context)


def setup_logger(level: str = "INFO", log_file: str = "booking_mcp.log") -> logging.Logger:
    """Configure JSON file logging plus a readable console stream."""

    base_dir = os.path.join(os.path.dirname(__file__), "..", "..", "..")
    log_dir = os.getenv("LOG_DIR") or os.path.join(base_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)

    log_path = os.path.join(log_dir, log_file)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    structured = StructuredFormatter()
    console = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(structured)
    file_handler.setLevel(logging.DEBUG)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(console)
    stream_handler.setLevel(getattr(logging, level.upper()))

    root_logger.addHandler(file_handler)
    root_logger.addHandler(stream_handler)

    return root_logger


def get_logger(name: str) -> StructuredLogger:
    """Return a structured logger instance"""

    return StructuredLogger(name)


def log_operation(operation_name: str):
    """Decorator that adds duration metadata to logs, for plain and async callables."""

    def decorator(func):
        logger = get_logger(func.__module__)

        def _finish(start: float) -> None:
            duration = round((time.time() - start) * 1000, 2)
            logger.info(f"Completed {operation_name}", operation=operation_name, duration_ms=duration)

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                start = time.time()
                logger.debug(f"Starting {operation_name}", operation=operation_name)
                try:
                    return await func(*args, **kwargs)
                finally:
                    _finish(start)

            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.time()
            logger.debug(f"Starting {operation_name}", operation=operation_name)
            try:
                return func(*args, **kwargs)
            finally:
                _finish(start)

        return wrapper

    return decorator


setup_logger(level=os.getenv("LOG_LEVEL", "INFO"))
