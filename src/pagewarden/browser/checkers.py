"""
Checkers - Page assertions run after navigation.

Checkers are generally used to ensure the application under test did not
hit an error. The browser runs them automatically after:
    1. Opening a URL (Browser.goto)
    2. Refreshing the page (Browser.refresh)

Usage:
    def no_server_error(browser):
        if "Server Error" in browser.text:
            raise CheckerFailure("Application exception or 500 error!")

    browser.register_checker(no_server_error)
    browser.goto("www.mywebsite.com/page-with-error")  # raises CheckerFailure
"""

import logging
import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pagewarden.exceptions import InvalidCheckerError
from pagewarden.logging import PagewardenLogger

if TYPE_CHECKING:
    from pagewarden.browser.session import Browser

logger = logging.getLogger(__name__)
events = PagewardenLogger(__name__)


@runtime_checkable
class Checker(Protocol):
    """Anything callable with the owning browser as its only argument."""

    def __call__(self, browser: "Browser") -> Any: ...


def describe_checker(checker: Checker) -> str:
    """Readable name for a checker, used in log messages."""
    return getattr(checker, "__qualname__", None) or type(checker).__name__


class CheckerRegistry:
    """
    Ordered collection of checkers.

    Registration order is preserved and duplicates are allowed. The first
    checker that raises stops the run; its exception is not caught.
    """

    def __init__(self):
        self._checkers: list[Checker] = []
        self._lock = threading.Lock()

    def add(self, checker: Checker) -> Checker:
        """
        Append a checker.

        Returns the checker so the method can be used as a decorator.

        Raises:
            InvalidCheckerError: If checker is not callable
        """
        if not callable(checker):
            raise InvalidCheckerError(
                f"expected a callable taking the browser, got {type(checker).__name__}"
            )

        with self._lock:
            self._checkers.append(checker)

        logger.debug(f"Registered checker: {describe_checker(checker)}")
        return checker

    def remove(self, checker: Checker) -> None:
        """Remove every occurrence of checker. Does nothing if absent."""
        with self._lock:
            remaining = [c for c in self._checkers if c != checker]
            removed = len(self._checkers) - len(remaining)
            self._checkers = remaining

        if removed:
            logger.debug(f"Removed checker: {describe_checker(checker)}")

    def run_all(self, browser: "Browser") -> None:
        """
        Call each checker in registration order with browser.

        Args:
            browser: Owning browser, passed as the sole argument
        """
        with self._lock:
            checkers = list(self._checkers)

        for checker in checkers:
            try:
                checker(browser)
            except Exception:
                events.checker(describe_checker(checker), passed=False)
                raise
            events.checker(describe_checker(checker))

    def clear(self) -> None:
        """Remove all checkers."""
        with self._lock:
            self._checkers.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._checkers)

    def __iter__(self) -> Iterator[Checker]:
        with self._lock:
            return iter(list(self._checkers))

    def __contains__(self, checker: object) -> bool:
        with self._lock:
            return checker in self._checkers
