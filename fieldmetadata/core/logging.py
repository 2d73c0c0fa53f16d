"""Structured logging with console/JSON formatters"""
import logging
import sys
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger


class SafeJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that never fails"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record safely"""
        try:
            for key, value in record.__dict__.items():
                if value is None:
                    setattr(record, key, "none")
            return super().format(record)
        except Exception:
            return f"{record.levelname}: {record.getMessage()}"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    # Context keys rendered after the message, in this order
    CONTEXT_KEYS = ("entity", "field_name", "context", "format_type", "fields_count")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for console output"""
        try:
            color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
            reset = self.COLORS['RESET']

            timestamp = datetime.fromisoformat(
                record.timestamp if hasattr(record, 'timestamp')
                else datetime.now(timezone.utc).isoformat()
            ).strftime("%Y-%m-%d %H:%M:%S")

            parts = [timestamp, f"{color}{record.levelname:8s}{reset}", record.getMessage()]

            extra_parts = []
            for key in self.CONTEXT_KEYS:
                value = getattr(record, key, None)
                if value not in (None, "none"):
                    extra_parts.append(f"{key}={value}")
            if extra_parts:
                parts.append(f"({' | '.join(extra_parts)})")

            return " ".join(parts)
        except Exception:
            return f"{record.levelname}: {record.getMessage()}"


def get_logger(name: str, use_console: Optional[bool] = None) -> logging.Logger:
    """
    Get a configured logger.

    Args:
        name: Logger name
        use_console: If True, use console formatter; if False, use JSON;
                    if None, use LOG_FORMAT env var or settings.log_format
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        from fieldmetadata.core.config import settings

        if use_console is None:
            log_format = os.getenv("LOG_FORMAT", settings.log_format).lower()
            use_console = log_format in ("console", "human", "readable")

        handler = logging.StreamHandler(sys.stdout)
        if use_console:
            formatter = ConsoleFormatter()
        else:
            formatter = SafeJsonFormatter(
                "%(timestamp)s %(levelname)s %(name)s %(message)s"
            )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
        logger.setLevel(log_level)

    return logger


def safe_log(
    logger: logging.Logger,
    level: int,
    message: str,
    **kwargs: Any
) -> None:
    """
    Log a message with extra context, never raising.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, logging.WARNING, etc.)
        message: Log message
        **kwargs: Additional context to include in log
    """
    try:
        if not logger.isEnabledFor(level):
            return

        extra: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        for key, value in kwargs.items():
            if value is None:
                extra[key] = "none"
            elif isinstance(value, (str, int, float, bool)):
                extra[key] = value
            else:
                try:
                    extra[key] = str(value)
                except Exception:
                    extra[key] = "unserializable"

        logger.log(level, message, extra=extra)
    except Exception as e:
        try:
            print(f"Logging error (non-critical): {e}")
        except Exception:
            pass
