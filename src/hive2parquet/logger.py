"""Structured logging system for hive2parquet."""

import json
import logging
import sys
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "component": getattr(record, "component", "hive2parquet"),
            "message": record.getMessage(),
        }

        optional_fields = ["operationId", "inputFile", "column", "errorCode"]
        for field in optional_fields:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if hasattr(record, "fields") and isinstance(record.fields, dict):
            log_entry.update(record.fields)

        return json.dumps(log_entry, default=str)


class ConverterLogger:
    """Centralized logging with structured output."""

    def __init__(self, level: LogLevel = LogLevel.INFO, component: str = "hive2parquet",
                 destination: str = "stderr"):
        self.component = component
        self.operation_id = str(uuid4())

        self.logger = logging.getLogger(f"hive2parquet.{component}")
        self.logger.setLevel(_LEVELS[LogLevel(level)])

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        stream = sys.stdout if destination == "stdout" else sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        self.logger.addHandler(handler)

        self.logger.propagate = False

    def _log(self, level: int, message: str, **kwargs) -> None:
        if not self.logger.isEnabledFor(level):
            return
        extra = {
            "component": self.component,
            "operationId": self.operation_id,
            "fields": kwargs,
        }
        self.logger.log(level, message, extra=extra)

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warn(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def conversion_event(self, event: str, table_columns: int, **kwargs) -> None:
        """Log a schema conversion lifecycle event."""
        self.info(f"Conversion {event}", columns=table_columns, **kwargs)

    def performance_metric(self, metric_name: str, value: Any, unit: str = "", **kwargs) -> None:
        self.info(
            f"Performance: {metric_name}",
            metricName=metric_name,
            value=value,
            unit=unit,
            **kwargs
        )


def create_logger(level: LogLevel = LogLevel.INFO, component: str = "hive2parquet",
                  destination: str = "stderr") -> ConverterLogger:
    """Create a configured logger instance."""
    return ConverterLogger(level=level, component=component, destination=destination)
