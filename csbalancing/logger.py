"""
Structured logging for csbalancing.

Provides centralized logging with console and file outputs, plus
run metrics for monitoring how balancing runs resolve.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json

from .env import get_settings


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks metrics across balancing runs.
    """

    def __init__(
        self,
        name: str = "csbalancing",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers

        self.metrics = {
            "runs": 0,
            "customers_processed": 0,
            "customers_assigned": 0,
            "customers_unassigned": 0,
            "ties_detected": 0,
            "no_winner_runs": 0,
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"csbalancing_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if not self.logger.isEnabledFor(level):
            return
        if context:
            message = f"{message} | Context: {json.dumps(context)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_run(self, customers: int, assigned: int, winner_id: int, tie: bool):
        """Record the outcome of one balancing run."""
        self.metrics["runs"] += 1
        self.metrics["customers_processed"] += customers
        self.metrics["customers_assigned"] += assigned
        self.metrics["customers_unassigned"] += customers - assigned
        if tie:
            self.metrics["ties_detected"] += 1
        if winner_id == 0:
            self.metrics["no_winner_runs"] += 1

    def get_metrics(self) -> dict:
        """Return current metrics with the assignment rate filled in."""
        metrics_copy = self.metrics.copy()
        processed = metrics_copy["customers_processed"]
        metrics_copy["assignment_rate"] = (
            round(metrics_copy["customers_assigned"] / processed, 3) if processed else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Balancing Session Metrics ===")
        self.info(f"Runs: {metrics['runs']} ({metrics['no_winner_runs']} without a winner)")
        self.info(
            f"Customers: {metrics['customers_assigned']}/{metrics['customers_processed']} "
            f"assigned ({metrics['assignment_rate'] * 100:.1f}%)"
        )
        if metrics["ties_detected"]:
            self.info(f"Ties: {metrics['ties_detected']}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "csbalancing",
    level: Optional[str] = None,
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Settings not passed explicitly come from the CSB_* environment
    variables (see ``env.get_settings``). File logging is only on when
    a log directory is configured.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        settings = get_settings()
        kwargs.setdefault("log_dir", settings.log_dir)
        kwargs.setdefault("enable_file", kwargs["log_dir"] is not None)
        kwargs.setdefault("enable_console", settings.log_console)
        _global_logger = StructuredLogger(name=name, level=level or settings.log_level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
