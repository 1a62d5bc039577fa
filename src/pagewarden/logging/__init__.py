"""
Pagewarden Logging Module.

Provides structured logging with Rich console output.
"""

from pagewarden.logging.config import (
    PagewardenLogger,
    console,
    get_logger,
    logger,
    setup_logging,
)
from pagewarden.logging.formatters import (
    CompactFormatter,
    JSONFormatter,
    create_file_handler,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "PagewardenLogger",
    "logger",
    "console",
    "JSONFormatter",
    "CompactFormatter",
    "create_file_handler",
]
