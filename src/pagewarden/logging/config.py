"""
Logging Configuration - Structured logging with Rich console.

Provides pretty, structured logging for debugging browser sessions.
"""

import logging
from pathlib import Path
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from pagewarden.logging.formatters import create_file_handler

# Custom theme for Pagewarden logs
PAGEWARDEN_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "navigation": "bold green",
        "checker": "bold magenta",
        "script": "dim cyan",
    }
)

# Shared console instance
console = Console(theme=PAGEWARDEN_THEME)


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO",
    show_path: bool = False,
    json_path: str | Path | None = None,
) -> None:
    """
    Configure logging with Rich console handler.

    Args:
        level: Logging level
        show_path: Show file path in log messages
        json_path: Optional file receiving JSON-formatted records as well
    """
    handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    handlers: list[logging.Handler] = [handler]
    if json_path:
        handlers.append(create_file_handler(str(json_path)))

    # Configure root pagewarden logger
    pagewarden_logger = logging.getLogger("pagewarden")
    pagewarden_logger.setLevel(level)
    pagewarden_logger.handlers = handlers
    pagewarden_logger.propagate = False

    # selenium never logs below INFO through our handlers
    selenium_level = max(logging.getLevelNamesMapping()[level], logging.INFO)
    logging.getLogger("selenium").setLevel(selenium_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with pagewarden prefix.

    Args:
        name: Logger name (will be prefixed with 'pagewarden.')

    Returns:
        Configured logger
    """
    if name != "pagewarden" and not name.startswith("pagewarden."):
        name = f"pagewarden.{name}"
    return logging.getLogger(name)


class PagewardenLogger:
    """
    Structured logger for Pagewarden operations.

    Provides semantic logging methods for different operation types.
    """

    def __init__(self, name: str = "pagewarden"):
        self._logger = get_logger(name)

    def navigation(self, url: str, status: str = "started") -> None:
        """Log navigation event."""
        self._logger.info(
            f"[navigation]Navigation {status}[/navigation]: "
            f"{url[:60]}{'...' if len(url) > 60 else ''}"
        )

    def checker(self, name: str, passed: bool = True) -> None:
        """Log checker outcome."""
        outcome = "passed" if passed else "failed"
        level = logging.DEBUG if passed else logging.WARNING
        self._logger.log(
            level, f"[checker]Checker {name}[/checker] {outcome}", extra={"checker": name}
        )

    def script(self, script: str) -> None:
        """Log script execution (debug level)."""
        truncated = script[:80] + ("..." if len(script) > 80 else "")
        self._logger.debug(f"[script]JS[/script]: {truncated}")

    def error(self, message: str, exc: Exception | None = None) -> None:
        """Log error."""
        self._logger.error(f"[error]{message}[/error]", exc_info=exc)

    def warning(self, message: str) -> None:
        """Log warning."""
        self._logger.warning(f"[warning]{message}[/warning]")

    def success(self, message: str) -> None:
        """Log success message."""
        self._logger.info(f"[green]✓[/green] {message}")

    def debug(self, message: str) -> None:
        """Log debug message."""
        self._logger.debug(message)

    def info(self, message: str) -> None:
        """Log info message."""
        self._logger.info(message)


# Default logger instance
logger = PagewardenLogger()
