"""
Logging for hmpi-pipeline

Every hmpi_pipeline logger writes one line per event to stderr, either as a
JSON object (python-json-logger) or as plain text for local runs. stdout is
left to the CLI, which prints the analysis payload there.
"""
import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Iterator

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "hmpi-pipeline"
PACKAGE_LOGGER_PREFIX = "hmpi_pipeline"

JSON_FIELDS = "%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s"
TEXT_FIELDS = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with ISO timestamp, upper-case level and call site."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = log_record.get("timestamp") or self.formatTime(record, self.datefmt)
        log_record["level"] = (log_record.get("level") or record.levelname).upper()
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(format_type: str | None) -> logging.Formatter:
    if (format_type or os.getenv("LOG_FORMAT") or "json") == "json":
        return CustomJsonFormatter(fmt=JSON_FIELDS, datefmt="%Y-%m-%dT%H:%M:%S")
    return logging.Formatter(fmt=TEXT_FIELDS, datefmt="%H:%M:%S")


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    (Re)configure a logger with a single stderr handler.

    Args:
        name: Logger name
        level: Level name; LOG_LEVEL env var, then INFO, when omitted
        format_type: "json" or "text"; LOG_FORMAT env var, then json,
            when omitted

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(format_type))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    return logger if logger.handlers else setup_logger(name)


def configure_logging(level: str | None = None, format_type: str | None = None) -> None:
    """Apply loaded settings to every package logger created so far."""
    for name in list(logging.root.manager.loggerDict):
        if name == DEFAULT_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_PREFIX):
            setup_logger(name, level=level, format_type=format_type)


class OperationTimer:
    """Holds the elapsed time of a logged operation once it has finished."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.duration = 0.0


@contextmanager
def log_operation(
    operation_name: str, logger: logging.Logger | None = None, **extra_fields
) -> Iterator[OperationTimer]:
    """
    Log the start and the outcome of a pipeline step.

    Failures are logged with the exception type and re-raised.

    Usage:
        with log_operation("Reading file", logger=logger, file_path=path):
            rows = reader.read(path)
    """
    logger = logger or get_logger()
    timer = OperationTimer(operation_name)
    fields = {"operation": operation_name, **extra_fields}

    logger.info(f"Starting: {operation_name}", extra=fields)
    started = time.perf_counter()
    try:
        yield timer
    except Exception as e:
        timer.duration = time.perf_counter() - started
        logger.error(
            f"Failed: {operation_name}",
            extra={
                **fields,
                "duration_seconds": round(timer.duration, 3),
                "status": "error",
                "error_type": type(e).__name__,
                "error_message": str(e),
            },
            exc_info=True,
        )
        raise
    timer.duration = time.perf_counter() - started
    logger.info(
        f"Completed: {operation_name}",
        extra={**fields, "duration_seconds": round(timer.duration, 3), "status": "success"},
    )
