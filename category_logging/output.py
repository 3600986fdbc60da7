"""
Output Sink
Plain, warning and fatal channels on top of the standard logging module
"""

import logging
import logging.handlers
import os
import sys
import threading
from datetime import datetime
from typing import Dict, Optional
from pathlib import Path

from .config import Config

ROOT_LOGGER_NAME = 'category_logging'

# Lowest channel level; every channel must pass the sink unfiltered
CHANNEL_LEVEL = logging.INFO


class OutputSink:
    """
    Routes formatted logger lines to stdlib logging
    One child logger per category, all propagating to a shared parent
    """

    def __init__(self, config=None, name: str = ROOT_LOGGER_NAME):
        """
        Initialize output sink with configuration

        Args:
            config: Configuration object (defaults loaded from the environment)
            name: Name of the parent logger
        """
        self.config = config if config is not None else Config()
        self.name = name
        self._loggers: Dict[str, logging.Logger] = {}
        self._main_logger: Optional[logging.Logger] = None

        # Initialize logging infrastructure
        self._setup_logging()

    def _setup_logging(self):
        """Setup logging infrastructure"""

        # Create logs directory if needed
        if self.config.writes_to_file():
            os.makedirs(self.config.LOG_FILE_PATH, exist_ok=True)

        # Create main logger
        main_logger = logging.getLogger(self.name)
        main_logger.setLevel(CHANNEL_LEVEL)
        for handler in list(main_logger.handlers):
            main_logger.removeHandler(handler)
            handler.close()

        # Create formatters
        detailed_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_formatter = logging.Formatter(self.config.LOG_CONSOLE_FORMAT)

        # Add console handler
        if self.config.writes_to_console():
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(CHANNEL_LEVEL)
            console_handler.setFormatter(console_formatter)
            main_logger.addHandler(console_handler)

        # Add file handler with rotation
        if self.config.writes_to_file():
            log_file = Path(self.config.LOG_FILE_PATH) / f"{self.name}_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.config.LOG_FILE_MAX_SIZE * 1024 * 1024,  # Convert MB to bytes
                backupCount=self.config.LOG_FILE_BACKUP_COUNT
            )
            file_handler.setLevel(CHANNEL_LEVEL)
            file_handler.setFormatter(detailed_formatter)
            main_logger.addHandler(file_handler)

        self._loggers.clear()
        self._main_logger = main_logger

    def channel(self, category: str) -> logging.Logger:
        """
        Get the stdlib logger for a category

        Args:
            category: Logger category

        Returns:
            Child logger named "<parent>.<category>"
        """
        logger = self._loggers.get(category)
        if logger is None:
            # Dots would nest categories under each other
            logger = logging.getLogger(f"{self.name}.{category.replace('.', '_')}")
            logger.setLevel(CHANNEL_LEVEL)
            logger.propagate = True  # Inherit handlers from parent
            self._loggers[category] = logger
        return logger

    def write(self, category: str, line: str):
        """Plain output line"""
        self.channel(category).info(line)

    def warn(self, category: str, line: str):
        """Warning output line"""
        self.channel(category).warning(line)

    def fatal(self, category: str, line: str):
        """
        Report a fatal message

        The caller is responsible for aborting; this only records the line.
        """
        if self.config.LOG_FATAL_ERRORS:
            self.channel(category).error(line)

    def close(self):
        """Flush and detach handlers from the parent logger"""
        main_logger = self._main_logger or logging.getLogger(self.name)
        for handler in list(main_logger.handlers):
            handler.flush()
            main_logger.removeHandler(handler)
            handler.close()


_default_sink: Optional[OutputSink] = None
_default_sink_lock = threading.Lock()


def _load_default_config() -> Config:
    """Environment configuration, or console defaults when the environment is invalid"""
    try:
        return Config()
    except ValueError as e:
        logging.getLogger(__name__).warning("Invalid logging configuration, using defaults: %s", e)
        return Config.defaults()


def get_default_sink() -> OutputSink:
    """Return the process-wide sink, creating it from the environment on first use"""
    global _default_sink
    with _default_sink_lock:
        if _default_sink is None:
            _default_sink = OutputSink(_load_default_config())
        return _default_sink


def set_default_sink(sink: Optional[OutputSink]):
    """Replace the process-wide sink (None recreates it on next use)"""
    global _default_sink
    with _default_sink_lock:
        _default_sink = sink
