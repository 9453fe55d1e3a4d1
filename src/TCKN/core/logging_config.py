"""
Centralized logging configuration for the verification client.

Provides standardized logging setup with a console handler and an optional
rotating file handler, ensuring consistent log formatting across modules.

Module Input:
    - Logger name strings from calling modules
    - Log messages from client code
    - Level and file options from settings

Module Output:
    - Formatted log entries to console (stdout)
    - Formatted log entries to rotating file (when enabled)
    - Configured logger instances for modules
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from .settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LoggerConfig:
    """Class to manage logger configuration and creation."""

    # Loggers already configured by any LoggerConfig instance
    _configured_loggers = set()

    def __init__(
        self,
        log_level: int = logging.INFO,
        log_dir: str = "logs",
        log_file: str = "tckn.log",
        log_to_file: bool = False,
        max_bytes: int = 10_485_760,  # 10MB
        backup_count: int = 5
    ):
        """
        Initialize logger configuration.

        Args:
            log_level: Minimum logging level (default: INFO)
            log_dir: Directory where log files are saved
            log_file: Name of the log file
            log_to_file: Whether to attach a rotating file handler
            max_bytes: Maximum size of log file before rotation (10MB default)
            backup_count: Number of backup log files to keep
        """
        self.log_level = log_level
        self.log_dir = Path(log_dir)
        self.log_file = log_file
        self.log_to_file = log_to_file
        self.max_bytes = max_bytes
        self.backup_count = backup_count

    def _create_formatter(self) -> logging.Formatter:
        # Format: "2024-01-15 10:30:45 | INFO     | module:function:line | message"
        return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    def _create_console_handler(self) -> logging.StreamHandler:
        """
        Create console handler that outputs to stdout.

        Returns:
            logging.StreamHandler: Configured console handler
        """
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(self._create_formatter())
        return console_handler

    def _create_file_handler(self) -> Optional[RotatingFileHandler]:
        """
        Create rotating file handler when file logging is enabled.

        Returns:
            RotatingFileHandler or None: File handler (None if disabled)

        Note:
            - Creates log_dir on first use
            - Automatically rotates when file reaches max_bytes
            - Keeps backup_count number of old log files
        """
        if not self.log_to_file:
            return None

        self.log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = self.log_dir / self.log_file

        file_handler = RotatingFileHandler(
            log_file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(self.log_level)
        file_handler.setFormatter(self._create_formatter())

        return file_handler

    def get_logger(self, name: str) -> logging.Logger:
        """
        Get or create a logger with standardized configuration.

        Creates a logger instance with a console handler (and a rotating
        file handler when enabled). Prevents duplicate handler configuration
        on repeated calls.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Configured logger instance ready for use

        Side Effects:
            - Creates log directory if file logging is enabled
            - Adds logger name to _configured_loggers set
        """
        if name in LoggerConfig._configured_loggers:
            return logging.getLogger(name)

        logger = logging.getLogger(name)
        logger.setLevel(self.log_level)

        # Handlers already present (e.g. attached by the host application)
        if logger.handlers:
            return logger

        logger.addHandler(self._create_console_handler())

        file_handler = self._create_file_handler()
        if file_handler is not None:
            logger.addHandler(file_handler)

        # Records are handled here; the host's root handlers would repeat them
        logger.propagate = False

        LoggerConfig._configured_loggers.add(name)

        return logger


# Default logger configuration instance, driven by settings
_default_config = LoggerConfig(
    log_level=settings.get_log_level(),
    log_dir=str(settings.log_dir),
    log_file=settings.log_file,
    log_to_file=settings.log_to_file,
)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with default configuration.

    Args:
        name: Logger name, typically __name__ from calling module

    Returns:
        logging.Logger: Configured logger instance ready for use

    Example:
        from TCKN.core.logging_config import get_logger

        logger = get_logger(__name__)
        logger.info("Verification requested")
    """
    return _default_config.get_logger(name)
