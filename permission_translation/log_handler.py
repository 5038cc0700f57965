"""
Log Handler Module

Provides logging management utilities.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from . import config

LOG_FORMAT = "[%(asctime)s] [PID:%(process)-8d] [%(levelname)-8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogManager:
    """
    Manages library logging configuration.
    """

    def __init__(self, app_name: str, log_level: str = "INFO", log_folder: Optional[str] = None):
        """
        Initialize the log manager.

        Args:
            app_name: Application name for the logger
            log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_folder: Directory to store log files. Console only when None.
        """
        self.app_name = app_name
        self.log_folder = log_folder
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)
        self.logger = None

    def setup(self) -> logging.Logger:
        """
        Set up and configure the logger.

        Returns:
            Configured logger instance
        """
        logger = logging.getLogger(self.app_name)
        logger.setLevel(self.log_level)

        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if self.log_folder:
            os.makedirs(self.log_folder, exist_ok=True)
            log_file = os.path.join(self.log_folder, f"{self.app_name}.log")
            file_handler = RotatingFileHandler(
                log_file, maxBytes=10 * 1024 * 1024, backupCount=5  # 10 MB
            )
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        self.logger = logger
        return logger

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """
        Get the configured logger instance or a child logger.

        Args:
            name: Optional name for a child logger

        Returns:
            Logger instance or child logger
        """
        if self.logger is None:
            self.setup()

        assert self.logger is not None, "Logger should be initialized"

        if name and name != self.app_name:
            return self.logger.getChild(name)
        return self.logger

    def close(self):
        """Detach and close every handler this manager installed."""
        if self.logger is None:
            return
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()


def setup_logging() -> LogManager:
    """
    Configure the package logger from the environment and .env settings.

    Returns:
        LogManager: The manager owning the configured "permission_translation" logger
    """
    log_level, log_folder = config.get_log_settings()
    log_manager = LogManager(config.APP_NAME, log_level, log_folder)
    log_manager.setup()
    return log_manager
