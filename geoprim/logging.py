"""Logging utilities with timing and operation tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional

from .config import LOG_ENABLED


class Logger:
    """Library logger with timestamps and operation counts."""

    def __init__(self, enabled: bool = LOG_ENABLED):
        self._start_time: float = now()
        self._ops: int = 0
        self._enabled: bool = enabled

    @property
    def enabled(self) -> bool:
        """Whether log lines are written."""
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)

    @property
    def ops(self) -> int:
        """Number of messages logged so far."""
        return self._ops

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return now() - self._start_time

    def format(self, msg: str) -> str:
        """Format a message with timestamp and operation number."""
        return f"[{self.elapsed:7.3f}s OP{self._ops:06d}] {msg}\n"

    def log(self, msg: str) -> None:
        """Log a message with timestamp and operation number."""
        if not self._enabled:
            return
        self._ops += 1
        line = self.format(msg)
        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError):
            sys.stderr.write(line)
            sys.stderr.flush()

    def __call__(self, msg: str) -> None:
        """Shorthand for log()."""
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def set_enabled(enabled: bool) -> None:
    """Turn log output on or off."""
    get_logger().enabled = enabled


def is_enabled() -> bool:
    return get_logger().enabled


# Time utilities
def now() -> float:
    """Get current time in seconds (high precision)."""
    return time.perf_counter()
