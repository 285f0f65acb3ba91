"""
Tests for the structured threshold logger.

Tests cover log level filtering, result formatting, statistics
formatting and custom stream output.
"""

from io import StringIO

from threshold.core.vector_clock import VectorClock
from threshold.utils.logger import LogLevel, ThresholdLogger


# ---------------------------------------------------------------------------
# Tests: Log Level Filtering
# ---------------------------------------------------------------------------


class TestLogLevelFiltering:
    """Test that log levels filter messages correctly."""

    def test_silent_suppresses_all(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.SILENT, stream=buf)
        logger.debug("debug msg")
        logger.info("info msg")
        logger.result(1, VectorClock({"A": 1}))
        logger.union(VectorClock({"A": 1}))
        assert buf.getvalue() == ""

    def test_normal_shows_results_only(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.NORMAL, stream=buf)
        logger.debug("debug msg")
        logger.info("info msg")
        logger.result(2, VectorClock({"A": 1}))
        assert buf.getvalue() == "t=2: {A:1}\n"

    def test_verbose_shows_info(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.VERBOSE, stream=buf)
        logger.info("progress update")
        assert "[INFO] progress update" in buf.getvalue()

    def test_verbose_hides_debug(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.VERBOSE, stream=buf)
        logger.debug("detailed debug info")
        logger.clock_added(1, VectorClock({"A": 1}))
        assert buf.getvalue() == ""

    def test_debug_shows_everything(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.DEBUG, stream=buf)
        logger.debug("debug msg")
        logger.info("info msg")
        output = buf.getvalue()
        assert "debug msg" in output
        assert "info msg" in output


# ---------------------------------------------------------------------------
# Tests: Formatting
# ---------------------------------------------------------------------------


class TestFormatting:
    """Test output formats."""

    def test_kwargs_are_indented(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.DEBUG, stream=buf)
        logger.debug("step", threshold=2, clocks=5)
        assert buf.getvalue() == "[DEBUG] step\n  threshold: 2\n  clocks: 5\n"

    def test_clock_added(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.DEBUG, stream=buf)
        logger.clock_added(3, VectorClock.from_seqs([1, 2]))
        assert buf.getvalue() == "[DEBUG] Added clock #3: {1:1, 2:2}\n"

    def test_union(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.NORMAL, stream=buf)
        logger.union(VectorClock({"B": 4}))
        assert buf.getvalue() == "union: {B:4}\n"

    def test_statistics_labels(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.VERBOSE, stream=buf)
        logger.statistics({"clocks": 3, "all_equal": False})
        output = buf.getvalue()
        assert "=== Statistics ===" in output
        assert "  Clocks: 3" in output
        assert "  All Equal: False" in output

    def test_statistics_hidden_at_normal(self) -> None:
        buf = StringIO()
        logger = ThresholdLogger(level=LogLevel.NORMAL, stream=buf)
        logger.statistics({"clocks": 3})
        assert buf.getvalue() == ""

    def test_default_level_is_normal(self) -> None:
        assert ThresholdLogger().level == LogLevel.NORMAL
