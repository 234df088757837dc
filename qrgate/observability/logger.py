"""
Structured logging for qrgate

Every qrgate logger writes one line per event to stderr, as JSON by default
(python-json-logger) or as plain text for local use. Scan context passed in
``extra`` (raw code, error code, wristband, operator) is grouped under a
single ``scan`` key so log consumers can filter on it.
"""
import logging
import os
import sys
import time
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# extra keys that describe the scan being processed
SCAN_CONTEXT_FIELDS = ("raw_code", "error_code", "wristband_id", "operator")


def scan_context(record: logging.LogRecord) -> dict:
    """Collect the scan context keys present on a log record."""
    return {key: getattr(record, key) for key in SCAN_CONTEXT_FIELDS if hasattr(record, key)}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter for scan logs

    Adds: timestamp (UTC, ms, Z suffix), level, logger and the ``scan`` group
    """

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )
        log_record["level"] = record.levelname
        log_record["logger"] = record.name

        context = {key: log_record.pop(key) for key in SCAN_CONTEXT_FIELDS if key in log_record}
        if context:
            log_record["scan"] = context


class ScanTextFormatter(logging.Formatter):
    """Plain text formatter that appends scan context as key=value pairs"""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = scan_context(record)
        if context:
            line += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"
        return line


def setup_logger(
    name: str = "qrgate",
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (defaults to env LOG_LEVEL, then INFO)
        format_type: "json" or "text" (defaults to env LOG_FORMAT, then "json")

    Returns:
        Configured logger instance
    """
    log_level_str = level or os.getenv("LOG_LEVEL", "INFO")
    log_level = LOG_LEVELS.get(log_level_str.upper(), logging.INFO)
    format_type = (format_type or os.getenv("LOG_FORMAT", "json")).lower()

    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.handlers.clear()

    # stdout is reserved for CLI output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if format_type == "json":
        formatter = CustomJsonFormatter(fmt="%(timestamp)s %(level)s %(logger)s %(message)s")
    else:
        formatter = ScanTextFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = "qrgate") -> logging.Logger:
    """Return the named logger, configuring it on first use."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger


class log_operation:
    """
    Context manager logging the start, end and duration of a CLI operation

    Fields added with note() inside the block are reported on completion.

    Usage:
        with log_operation("Parsing scan file", logger=logger, input_file=path) as op:
            results = [...]
            op.note(scans=len(results))
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.result_fields: dict = {}
        self.start_time = None

    def note(self, **fields) -> None:
        """Attach result fields to the completion entry."""
        self.result_fields.update(fields)

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.info(
            f"Starting: {self.operation_name}",
            extra={"operation": self.operation_name, **self.extra_fields}
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = round((time.perf_counter() - self.start_time) * 1000, 1)
        fields = {
            "operation": self.operation_name,
            "duration_ms": duration_ms,
            **self.extra_fields,
            **self.result_fields,
        }

        if exc_type is None:
            self.logger.info(f"Completed: {self.operation_name}", extra={"status": "success", **fields})
        else:
            self.logger.error(
                f"Failed: {self.operation_name}",
                extra={
                    "status": "error",
                    "error_type": exc_type.__name__,
                    "error_message": str(exc_val),
                    **fields,
                },
                exc_info=True
            )
        return False
