"""
Centralized logging configuration for the showcase.

The examples and the menu loop report failures through the abstract
LoggerBase interface, so that the destination of the messages can be
chosen by the caller. ConsoleLogger delegates to Python's logging
module and writes to stdout, where the output of the examples also
goes; LoglistLogger keeps the messages in memory, and is used to
inspect the failures reported by an example.

Usage:
    ```python
    from lcdemo.utils.logging import get_logger, LoglistLogger

    logger = get_logger(__name__)
    logger.error("Could not reach the model")

    recorder = LoglistLogger()
    run_basic_llm(logger=recorder)
    print(recorder.get_logs(level=3))
    ```
"""

import logging
import sys
from abc import ABC, abstractmethod

LOG_FORMAT = '%(levelname)s - %(message)s'


class LoggerBase(ABC):
    """
    Abstract interface for logging functionality.
    """

    @abstractmethod
    def set_level(self, level: int) -> None:
        """Set the logging level for the logger."""
        pass

    @abstractmethod
    def get_level(self) -> int:
        """Get the current logging level"""
        pass

    @abstractmethod
    def info(self, msg: str) -> None:
        """Log an informational message."""
        pass

    @abstractmethod
    def error(self, msg: str) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def warning(self, msg: str) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def critical(self, msg: str) -> None:
        """Log a critical message."""
        pass


class ConsoleLogger(LoggerBase):
    """
    A console logger implementation that uses logging.Logger as a
    delegate. Logs messages to the console using Python's built-in
    logging module.
    """

    def __init__(self, name: str | None = None) -> None:
        """
        Initialize the ConsoleLogger with a specific logger name,
        typically __name__ to use the module name
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Ensure we have a console handler if none exists
        if not self.logger.hasHandlers():
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)

    def get_level(self) -> int:
        return self.logger.level

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def critical(self, msg: str) -> None:
        self.logger.critical(msg, stack_info=True)


class LoglistLogger(LoggerBase):
    """
    Maintains a list of logged errors and warnings that can be
    inspected by the object creator.
    """

    def __init__(self) -> None:
        self.logs: list[dict[str, str]] = []

    def set_level(self, level: int) -> None:
        pass

    def get_level(self) -> int:
        return 0

    def info(self, msg: str) -> None:
        self.logs.append({'info': msg})

    def error(self, msg: str) -> None:
        self.logs.append({'error': msg})

    def warning(self, msg: str) -> None:
        self.logs.append({'warning': msg})

    def critical(self, msg: str) -> None:
        self.logs.append({'critical': msg})

    def get_logs(self, level: int = 0) -> list[str]:
        """
        Returns a list of strings with the log messages.

        Args:
           level: a filter on the logs. Possible values:
                0 or less: returns all messages
                1 or less: omit info
                2 or less: omit warning
                3 or more: only errors and critical
        """
        logs: list[str] = []
        for entry in self.logs:
            match entry:
                case {'info': msg}:
                    if level < 1:
                        logs.append("INFO - " + msg)
                case {'warning': msg}:
                    if level < 2:
                        logs.append("WARNING - " + msg)
                case {'error': msg}:
                    logs.append("ERROR - " + msg)
                case {'critical': msg}:
                    logs.append("CRITICAL - " + msg)
                case _:
                    logs.append(str(entry))
        return logs

    def count_logs(self, level: int = 0) -> int:
        """The number of recorded logs. Zero means there
        were no recorded logs."""
        return len(self.get_logs(level))

    def clear_logs(self) -> None:
        """Clear the logs from the cache"""
        self.logs.clear()

    def print_logs(self, level: int = 0) -> None:
        for log in self.get_logs(level):
            print(log)


def get_logger(name: str) -> LoggerBase:
    """
    Get a logger with the specified name.

    Args:
        name: The name of the logger, typically __name__ to use the
            module name

    Returns:
        A configured logger instance
    """
    return ConsoleLogger(name)

