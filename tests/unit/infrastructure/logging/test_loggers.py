"""Unit tests for logger implementations.

Tests verify that:
1. ConsoleLogger and NullLogger implement LoggerPort
2. ConsoleLogger honours verbosity levels and tracks export statistics
3. Rich markup inside messages is printed literally
"""

from io import StringIO
import unittest

from rich.console import Console

from trados_exchange.application.models import SerializationStats
from trados_exchange.application.ports.services import LoggerPort
from trados_exchange.infrastructure.logging import (
    ConsoleLogger,
    LogContext,
    LogLevel,
    NullLogger,
)


class TestLoggerPort(unittest.TestCase):
    """Test that logger implementations comply with LoggerPort protocol."""

    def test_console_logger_implements_loggerport(self):
        """ConsoleLogger should implement LoggerPort protocol."""
        self.assertIsInstance(ConsoleLogger(), LoggerPort)

    def test_null_logger_implements_loggerport(self):
        """NullLogger should implement LoggerPort protocol."""
        self.assertIsInstance(NullLogger(), LoggerPort)

    def test_loggerport_has_export_methods(self):
        """LoggerPort protocol should define the export lifecycle hooks."""
        required_methods = {
            "info",
            "success",
            "warning",
            "error",
            "debug",
            "verbose",
            "log_export_start",
            "log_selection_complete",
            "log_records_dropped",
            "log_export_complete",
            "log_final_stats",
        }
        protocol_methods = {
            name for name in dir(LoggerPort) if not name.startswith("_")
        }
        self.assertTrue(required_methods.issubset(protocol_methods))


class TestConsoleLogger(unittest.TestCase):
    """Test ConsoleLogger implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.buffer = StringIO()
        self.console = Console(file=self.buffer, force_terminal=True, width=120)
        self.logger = ConsoleLogger(console=self.console, verbosity=LogLevel.DEBUG)

    def test_initialization(self):
        """Logger should initialize with proper defaults."""
        logger = ConsoleLogger()
        self.assertEqual(logger.verbosity, 0)
        self.assertIsNone(logger._context)
        self.assertEqual(logger.get_stats()["exports"], 0)

    def test_info_logging(self):
        """info() should output message to console."""
        self.logger.info("Test message")
        self.assertIn("Test message", self.buffer.getvalue())

    def test_success_logging(self):
        """success() should output message with success indicator."""
        self.logger.success("Export complete")
        output = self.buffer.getvalue()
        self.assertIn("Export complete", output)
        self.assertIn("✓", output)

    def test_warning_logging(self):
        """warning() should output message and increment warning count."""
        self.logger.warning("Warning message")
        self.assertIn("Warning message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["warnings"], 1)

    def test_error_logging(self):
        """error() should output message and increment error count."""
        self.logger.error("Error message")
        self.assertIn("Error message", self.buffer.getvalue())
        self.assertEqual(self.logger.get_stats()["errors"], 1)

    def test_markup_in_messages_is_literal(self):
        """Paths and XML snippets must not be read as rich markup."""
        self.logger.warning("[bold]<node>[/bold]")
        self.assertIn("[bold]<node>[/bold]", self.buffer.getvalue())

    def test_verbose_respects_verbosity(self):
        """verbose() is silent at normal verbosity."""
        buffer = StringIO()
        logger = ConsoleLogger(
            console=Console(file=buffer, force_terminal=True, width=120),
            verbosity=LogLevel.NORMAL,
        )
        logger.verbose("Hidden detail")
        logger.debug("Debug detail")
        self.assertNotIn("Hidden detail", buffer.getvalue())
        self.assertNotIn("Debug detail", buffer.getvalue())

    def test_log_export_start_sets_context(self):
        """log_export_start() should count the export and remember the start."""
        self.logger.log_export_start("acme/about", "en", "de", "live")
        self.assertEqual(self.logger.get_stats()["exports"], 1)
        self.assertIsNotNone(self.logger._context)
        self.assertEqual(self.logger._context.starting_point, "acme/about")
        output = self.buffer.getvalue()
        self.assertIn("Target language: de", output)

    def test_selection_statistics(self):
        """Selection counters accumulate across calls."""
        self.logger.log_selection_complete(combinations=2, candidates=10, selected=6)
        self.logger.log_records_dropped(4)
        self.logger.log_records_dropped(0)
        stats = self.logger.get_stats()
        self.assertEqual(stats["combinations_scanned"], 2)
        self.assertEqual(stats["candidates_found"], 10)
        self.assertEqual(stats["records_dropped"], 4)

    def test_log_export_complete(self):
        """log_export_complete() should record node and variant totals."""
        self.logger.log_export_complete(
            SerializationStats(node_count=3, variant_count=5, property_count=7),
            "out.xml",
        )
        stats = self.logger.get_stats()
        self.assertEqual(stats["nodes_exported"], 3)
        self.assertEqual(stats["variants_exported"], 5)
        self.assertIn("out.xml", self.buffer.getvalue())

    def test_final_stats(self):
        """log_final_stats() prints a summary at verbose level."""
        self.logger.log_selection_complete(combinations=1, candidates=9, selected=6)
        self.logger.log_final_stats()
        self.assertIn("Export Statistics", self.buffer.getvalue())

    def test_reset_stats(self):
        self.logger.warning("x")
        self.logger.reset_stats()
        self.assertEqual(self.logger.get_stats()["warnings"], 0)

    def test_context_prefix_at_debug_level(self):
        self.logger.set_context(starting_point="acme", source_language="en")
        self.logger.info("Scanning")
        self.assertIn("[acme:en]", self.buffer.getvalue())
        self.logger.clear_context()
        self.assertIsNone(self.logger._context)


class TestLogContext(unittest.TestCase):
    def test_elapsed_ms_is_non_negative(self):
        self.assertGreaterEqual(LogContext().elapsed_ms(), 0)


class TestNullLogger(unittest.TestCase):
    """NullLogger accepts every call and prints nothing."""

    def test_all_methods_are_silent(self):
        logger = NullLogger()
        logger.info("x")
        logger.success("x")
        logger.warning("x")
        logger.error("x")
        logger.debug("x")
        logger.verbose("x")
        logger.log_export_start("acme", "en", None, "live")
        logger.log_selection_complete(combinations=1, candidates=1, selected=1)
        logger.log_records_dropped(1)
        logger.log_export_complete(SerializationStats())
        logger.log_final_stats()
