"""Test logging module"""

import io
import logging
import unittest
from contextlib import redirect_stdout

from lcdemo.utils.logging import (
    ConsoleLogger,
    LoggerBase,
    LoglistLogger,
    get_logger,
)


class TestLoglistLogger(unittest.TestCase):

    def setUp(self):
        self.logger = LoglistLogger()
        self.logger.info("info message")
        self.logger.warning("warning message")
        self.logger.error("error message")
        self.logger.critical("critical message")

    def test_get_logs(self):
        logs = self.logger.get_logs()
        self.assertEqual(
            logs,
            [
                "INFO - info message",
                "WARNING - warning message",
                "ERROR - error message",
                "CRITICAL - critical message",
            ],
        )

    def test_levels(self):
        self.assertEqual(self.logger.count_logs(0), 4)
        self.assertEqual(self.logger.count_logs(1), 3)
        self.assertEqual(self.logger.count_logs(2), 2)
        self.assertEqual(self.logger.count_logs(3), 2)

    def test_clear(self):
        self.logger.clear_logs()
        self.assertEqual(self.logger.count_logs(), 0)

    def test_print_logs(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            self.logger.print_logs(level=2)
        self.assertEqual(
            buffer.getvalue(),
            "ERROR - error message\nCRITICAL - critical message\n",
        )


class TestConsoleLogger(unittest.TestCase):

    def test_get_logger(self):
        logger = get_logger("lcdemo.test")
        self.assertIsInstance(logger, LoggerBase)
        self.assertIsInstance(logger, ConsoleLogger)

    def test_set_level(self):
        logger = ConsoleLogger("lcdemo.test.level")
        logger.set_level(logging.ERROR)
        self.assertEqual(logger.get_level(), logging.ERROR)

    def test_delegates_to_logging(self):
        logger = ConsoleLogger("lcdemo.test.delegate")
        with self.assertLogs("lcdemo.test.delegate", level="WARNING") as cm:
            logger.warning("careful")
            logger.error("failed")
        self.assertEqual(
            cm.output,
            [
                "WARNING:lcdemo.test.delegate:careful",
                "ERROR:lcdemo.test.delegate:failed",
            ],
        )


if __name__ == "__main__":
    unittest.main()
