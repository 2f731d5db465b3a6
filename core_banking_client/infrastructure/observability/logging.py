"""Structured JSON diagnostic logging, kept on stderr apart from demo output"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO

from pythonjsonlogger.json import JsonFormatter

from core_banking_client.config import get_settings

logger = logging.getLogger("core_banking_client")


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = get_settings().service_name


def setup_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Remove existing handlers
    root.handlers.clear()

    # stdout is reserved for the demo transcript
    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_request(
    operation: str,
    method: str,
    url: str,
    status_code: int,
    duration_ms: float,
) -> None:
    """Log one completed HTTP exchange"""
    logger.debug(
        "Request completed",
        extra={
            "operation": operation,
            "method": method,
            "url": url,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )


def log_test_failure(test_name: str, error: BaseException) -> None:
    """Log a demo test case that raised"""
    logger.warning(
        "Demo test failed",
        extra={
            "test_name": test_name,
            "error_type": type(error).__name__,
            "error": str(error),
        },
    )
