"""
Logging utilities for the MSK client-config generator.
"""

import logging
import sys
from typing import Optional

from .constants import LOGGING_CONFIG


def setup_logging(
    level: str = "WARNING",
    format_string: Optional[str] = None,
    suppress_modules: Optional[list] = None,
) -> logging.Logger:
    """
    Set up logging configuration for the application.

    Log records go to stderr; stdout is reserved for generated configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        suppress_modules: List of module names to suppress logging for

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = LOGGING_CONFIG["format"]

    if suppress_modules is None:
        suppress_modules = LOGGING_CONFIG["suppress_modules"]

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        stream=sys.stderr,
    )

    # Suppress noisy modules unless debugging
    if level.upper() != "DEBUG":
        for module in suppress_modules:
            logging.getLogger(module).setLevel(logging.WARNING)

    return logging.getLogger(__name__)


class DiscoveryLogger:
    """Context manager for discovery logging."""

    def __init__(self, logger: logging.Logger, operation: str):
        """
        Initialize the discovery logger.

        Args:
            logger: Logger instance
            operation: Operation being performed
        """
        self.logger = logger
        self.operation = operation

    def __enter__(self):
        """Log start of operation."""
        self.logger.info("Starting %s", self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Log completion or error of operation."""
        if exc_type is None:
            self.logger.info("Completed %s successfully", self.operation)
        else:
            self.logger.debug("Failed %s: %s", self.operation, exc_val)

    def log_cluster(self, identifier: str, broker_count: int, version: str):
        """Log the broker lookup result for one cluster."""
        self.logger.debug(
            "Cluster %s: %d brokers, version %s", identifier, broker_count, version
        )

    def log_discovery_result(self, count: int, region: str = "unknown"):
        """Log how many clusters were discovered."""
        self.logger.info("Discovered %d MSK clusters in %s", count, region)
