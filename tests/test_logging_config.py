# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import tempfile
import unittest
from pathlib import Path

from src.config.logging_config import setup_logging


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Detach handlers so each test configures from scratch."""
        self.root_logger = logging.getLogger("descu")
        self._clear()
        self.addCleanup(self._clear)

    def _clear(self) -> None:
        for handler in list(self.root_logger.handlers):
            handler.close()
            self.root_logger.removeHandler(handler)

    def test_setup_creates_log_file(self) -> None:
        """setup_logging returns a path that exists on disk."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches descu_YYYYMMDD_HHMMSS.log."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^descu_\d{8}_\d{6}\.log$")

    def test_log_file_inside_logs_dir(self) -> None:
        """Log file is created inside the logs/ directory."""
        log_path = setup_logging()
        self.assertEqual(log_path.parent.name, "logs")

    def test_handler_levels(self) -> None:
        """File handler logs DEBUG, console handler WARNING."""
        setup_logging()
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        stream_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(stream_handlers[0].level, logging.WARNING)

    def test_console_level_override(self) -> None:
        """The console threshold can be lowered."""
        setup_logging(console_level=logging.INFO)
        levels = [
            h.level
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(levels, [logging.INFO])

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice does not duplicate handlers."""
        setup_logging()
        count_before = len(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(len(self.root_logger.handlers), count_before)

    def test_module_loggers_reach_file(self) -> None:
        """Records from descu.* loggers end up in the run log."""
        log_path = setup_logging()
        logging.getLogger("descu.ranking").info("ranked 3 listings")
        for handler in self.root_logger.handlers:
            handler.flush()
        self.assertIn(
            "ranked 3 listings", log_path.read_text(encoding="utf-8")
        )


    def test_repeated_call_returns_active_file(self) -> None:
        """A second call reports the log file already in use."""
        first = setup_logging()
        self.assertEqual(setup_logging(), first)

    def test_new_logs_dir_moves_file_handler(self) -> None:
        """A different logs_dir on a later call is honoured."""
        first = setup_logging()
        other_dir = Path(tempfile.mkdtemp()) / "other"
        second = setup_logging(logs_dir=other_dir)
        self.assertEqual(second.parent, other_dir.absolute())
        self.assertNotEqual(second, first)
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(Path(file_handlers[0].baseFilename), second)
        self.assertEqual(len(self.root_logger.handlers), 2)

        logging.getLogger("descu.store").info("moved here")
        file_handlers[0].flush()
        self.assertIn("moved here", second.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
