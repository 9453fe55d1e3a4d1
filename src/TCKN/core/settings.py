"""
Centralized configuration management using Pydantic.

This module defines the Settings class which loads and validates client
configuration from environment variables or .env file.

Module Input:
    - Environment variables prefixed with TCKN_
    - .env file in project root (optional)
    - Default values defined in class

Module Output:
    - Validated configuration object (singleton)
    - Helper methods for log level and timeout resolution
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


KPS_PUBLIC_URL = "https://tckimlik.nvi.gov.tr/Service/KPSPublic.asmx"


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables and .env file.

    Every field can be overridden with a ``TCKN_`` prefixed environment
    variable, e.g. ``TCKN_REQUEST_TIMEOUT=10``.

    Attributes:
        Service Configuration:
            kps_endpoint_url (str): KPSPublic SOAP endpoint
            request_timeout (Optional[float]): Seconds before the HTTPS call
                gives up (default: None, no timeout)
            turkish_casing (bool): Upper-case names with Turkish dotted and
                dotless i rules (default: False)

        Logging Configuration:
            log_level (str): Minimum log level (default: "INFO")
            log_to_file (bool): Also write a rotating log file (default: False)
            log_dir (Path): Directory for log files (default: "logs")
            log_file (str): Log file name (default: "tckn.log")
    """

    # ---------------- Service Configuration ----------------
    kps_endpoint_url: str = KPS_PUBLIC_URL
    request_timeout: Optional[float] = None
    turkish_casing: bool = False

    # ---------------- Logging ----------------
    log_level: str = "INFO"
    log_to_file: bool = False
    log_dir: Path = Path("logs")
    log_file: str = "tckn.log"

    # ---------------- Pydantic Settings ----------------
    model_config = SettingsConfigDict(
        env_prefix="TCKN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ---------------- Helper Methods ----------------
    def get_log_level(self) -> int:
        """
        Resolve the configured log level name.

        Returns:
            int: logging module level constant

        Raises:
            ConfigError: If the name is not a standard logging level

        Example:
            >>> Settings(log_level="debug").get_log_level()
            10
        """
        name = self.log_level.strip().upper()
        level = logging.getLevelName(name)
        if isinstance(level, int):
            return level
        raise ConfigError(
            f"Invalid log level: {self.log_level}",
            details={
                "valid_levels": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                "provided_level": self.log_level,
            }
        )

    def get_timeout(self) -> Optional[float]:
        """
        Return the request timeout in seconds, or None for no timeout.

        Raises:
            ConfigError: If the timeout is zero or negative
        """
        if self.request_timeout is None:
            return None
        if self.request_timeout <= 0:
            raise ConfigError(
                f"Invalid request timeout: {self.request_timeout}",
                details={"provided_timeout": self.request_timeout}
            )
        return float(self.request_timeout)

    def get_endpoint_url(self) -> str:
        url = self.kps_endpoint_url.strip()
        if not url:
            raise ConfigError("KPS endpoint URL cannot be empty")
        return url


# Singleton instance shared across the package
settings = Settings()
