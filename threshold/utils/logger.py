"""
Structured logging for threshold computations.

Provides configurable log levels (silent, normal, verbose, debug)
with consistent formatting for per-clock progress, threshold union
results and run statistics.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Any, Dict, TextIO


class LogLevel(Enum):
    """
    Logging levels for threshold runs.

    SILENT:  No output at all.
    NORMAL:  Threshold union results only.
    VERBOSE: Progress information and statistics.
    DEBUG:   Detailed per-clock output.
    """

    SILENT = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


class ThresholdLogger:
    """
    Structured logger for threshold clocks and the CLI.

    Output is filtered by the configured log level.

    Attributes:
        level: The minimum log level to display.
        stream: The output stream (defaults to stdout).
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        stream: TextIO = sys.stdout,
    ) -> None:
        self.level: LogLevel = level
        self.stream: TextIO = stream

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log a debug message (only shown at DEBUG level).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.DEBUG.value:
            self._write(f"[DEBUG] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log an info message (shown at VERBOSE and DEBUG levels).

        Args:
            message: The message to log.
            **kwargs: Additional key-value pairs to include.
        """
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write(f"[INFO] {message}")
            for k, v in kwargs.items():
                self._write(f"  {k}: {v}")

    def result(self, threshold: int, clock: Any) -> None:
        """Log a threshold union result (shown at NORMAL level and above)."""
        if self.level.value >= LogLevel.NORMAL.value:
            self._write(f"t={threshold}: {clock}")

    def union(self, clock: Any) -> None:
        """Log the plain union of all clocks (shown at NORMAL level and above)."""
        if self.level.value >= LogLevel.NORMAL.value:
            self._write(f"union: {clock}")

    def clock_added(self, index: int, clock: Any) -> None:
        """
        Log one added clock (shown at DEBUG level).

        Args:
            index: 1-based position of the clock in the accumulation.
            clock: The clock that was added.
        """
        if self.level.value >= LogLevel.DEBUG.value:
            self._write(f"[DEBUG] Added clock #{index}: {clock}")

    def statistics(self, stats: Dict[str, Any]) -> None:
        """
        Log run statistics (shown at VERBOSE level and above).

        Args:
            stats: Dictionary of statistic names to values.
        """
        if self.level.value >= LogLevel.VERBOSE.value:
            self._write("=== Statistics ===")
            for key, value in stats.items():
                label = key.replace("_", " ").title()
                self._write(f"  {label}: {value}")

    def _write(self, message: str) -> None:
        """Write a line to the output stream."""
        self.stream.write(message + "\n")
