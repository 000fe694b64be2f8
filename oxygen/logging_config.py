r"""
Logging configuration module for the Oxygen factoid bot.

Provides a colorlog based root logger setup plus structured error logging
with per-type occurrence counts.
"""

import atexit
import logging
import os
import sys
import threading
import time
from collections import Counter
from typing import Any

import colorlog


class ErrorAggregator:
    """Counts error occurrences per type for an end-of-session summary."""

    def __init__(self):
        self.counts: Counter[str] = Counter()
        self.last_message: dict[str, str] = {}
        self.lock = threading.Lock()
        self.start_time = time.time()

    def record_error(self, error_type: str, message: str) -> None:
        with self.lock:
            self.counts[error_type] += 1
            self.last_message[error_type] = message

    def get_error_summary(self) -> dict[str, dict[str, Any]]:
        with self.lock:
            return {
                error_type: {
                    "total_count": count,
                    "last_message": self.last_message.get(error_type),
                }
                for error_type, count in self.counts.items()
            }

    def reset(self) -> None:
        with self.lock:
            self.counts.clear()
            self.last_message.clear()
            self.start_time = time.time()

    def log_summary_report(self) -> None:
        """Log a summary report of error patterns."""
        summary = self.get_error_summary()
        if not summary:
            logging.info("No errors recorded in current session")
            return
        runtime_minutes = (time.time() - self.start_time) / 60
        logging.warning(f"🚨 ERROR SUMMARY REPORT ({runtime_minutes:.1f} min)")
        for error_type, stats in summary.items():
            logging.warning(f"  {error_type}: {stats['total_count']} total")
            if stats["last_message"]:
                logging.warning(f"    Last: {stats['last_message']}")


# Global error aggregator instance
error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context and record it in the aggregator.

    Args:
        error_type: Category of the error (e.g., 'network', 'parsing', 'store')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)
    error_aggregator.record_error(error_type, message)


class LoggerConfigurator:
    """Handles logging configuration using colorlog.

    Supports the DEBUG environment variable for the log level.
    """

    def __init__(self, config=None):
        self.config = config or {}

    def configure(self):
        """Configure the root logger with colored output.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        if self.config.get("error_summary", True):
            atexit.register(self._log_final_error_summary)
        return handler

    def _log_final_error_summary(self):
        """Log final error summary on application exit."""
        try:
            logging.info("📊 Final error summary before shutdown:")
            error_aggregator.log_summary_report()
        except Exception as e:  # noqa: BLE001
            logging.error(f"Failed to log final error summary: {e}")
