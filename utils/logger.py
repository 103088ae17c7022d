# utils/logger.py
# This file is part of Verum - A Propositional Tautology Checker
#
# Logging utility for expression checking with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for expression checking."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CalculatorLogger:
    """Centralized logger for the calculator with structured output."""

    def __init__(self, name: str = "verum", level: LogLevel = LogLevel.INFO):
        """Initialize the calculator logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = _StdoutHandler()
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CalculatorFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for checking events
    def expression_loaded(self, text: str, variables: str, source: Optional[str] = None):
        """Log a freshly parsed expression."""
        source_str = f" ({source})" if source else ""
        self.info(f"Expression{source_str}: {text}")
        self.debug(f"    Variables in play: {variables}")

    def verdict_reached(self, text: str, verdict: str):
        """Log the classification of an expression."""
        self.info(f"  {text} → {verdict}")

    def counterexample_found(self, expected: bool, assignment: str):
        """Log the first assignment that breaks the expected value."""
        self.info(f"    Counter-example to always-{str(expected).lower()}: {assignment}")

    def truth_table_row(self, assignment: str, value: bool):
        """Log a single truth table row."""
        self.info(f"    {assignment} | {int(value)}")


class _StdoutHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stdout is at emit time."""

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


class CalculatorFormatter(logging.Formatter):
    """Custom formatter for calculator logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CalculatorLogger] = None


def get_logger(name: str = "verum") -> CalculatorLogger:
    """Get or create the global calculator logger instance.

    Args:
        name: Logger name (default: "verum")

    Returns:
        CalculatorLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(name)
    return _global_logger

