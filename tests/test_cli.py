"""
Tests for the exifgeo command line.
"""

import io
import logging
import unittest

from rich.console import Console
from rich.logging import RichHandler

from exifgeo.cli import main
from exifgeo.log import configure_logging, get_logger


def make_console():
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestCli(unittest.TestCase):
    """Test the to-dms and to-decimal commands."""

    def setUp(self):
        """Set up a console writing to memory."""
        self.console = make_console()

    def output(self):
        """Return what the command printed."""
        return self.console.file.getvalue().strip()

    def test_to_dms_single_angle(self):
        """Test one angle is printed in DMS."""
        self.assertEqual(main(["to-dms", "10.5"], self.console), 0)
        self.assertEqual(self.output(), "10° 30' 0\"")

    def test_to_dms_coordinate(self):
        """Test a latitude and longitude pair is printed in DMS."""
        self.assertEqual(main(["to-dms", "-1.25", "10.5"], self.console), 0)
        self.assertEqual(self.output(), "-1° 15' 0\", 10° 30' 0\"")

    def test_to_decimal(self):
        """Test DMS components are combined into decimal degrees."""
        self.assertEqual(main(["to-decimal", "10", "30", "0"], self.console), 0)
        self.assertEqual(self.output(), "10.5")

    def test_to_decimal_negative(self):
        """Test --negative flips the sign."""
        self.assertEqual(main(["to-decimal", "10", "30", "0", "--negative"], self.console), 0)
        self.assertEqual(self.output(), "-10.5")

    def test_to_decimal_reference(self):
        """Test a southern reference flips the sign."""
        self.assertEqual(main(["to-decimal", "10/1", "30/1", "0/1", "--ref", "s"], self.console), 0)
        self.assertEqual(self.output(), "-10.5")

    def test_to_decimal_unavailable(self):
        """Test a zero denominator reports an unavailable coordinate."""
        self.assertEqual(main(["to-decimal", "10", "30", "1/0"], self.console), 1)
        self.assertEqual(self.output(), "coordinate unavailable")

    def test_bad_component(self):
        """Test unparseable components exit with status 2."""
        with self.assertRaises(SystemExit) as cm:
            main(["to-decimal", "ten", "30", "0"], self.console)
        self.assertEqual(cm.exception.code, 2)


class TestLogging(unittest.TestCase):
    """Test logger setup."""

    def tearDown(self):
        """Remove handlers installed by the test."""
        get_logger().handlers.clear()

    def test_get_logger_names(self):
        """Test loggers are namespaced under exifgeo."""
        self.assertEqual(get_logger("geo").name, "exifgeo.geo")
        self.assertEqual(get_logger("exifgeo.gps").name, "exifgeo.gps")
        self.assertEqual(get_logger().name, "exifgeo")

    def test_configure_logging(self):
        """Test a single RichHandler is installed at the given level."""
        logger = configure_logging("debug", make_console())
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], RichHandler)
        configure_logging("info", make_console())
        self.assertEqual(len(logger.handlers), 1)

    def test_unknown_level_falls_back_to_warning(self):
        """Test an unknown level name falls back to WARNING."""
        logger = configure_logging("chatty", make_console())
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
