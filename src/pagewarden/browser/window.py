"""
Window - Browser window (tab) handles.
"""

import contextlib
import logging
from collections.abc import Iterator

from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)


class Window:
    """
    A single browser window, addressed by its driver handle.

    Usage:
        # Focus on the second window
        browser.window(index=1).use()
    """

    def __init__(self, driver: WebDriver, handle: str):
        self._driver = driver
        self._handle = handle

    @property
    def handle(self) -> str:
        return self._handle

    @property
    def is_current(self) -> bool:
        return self._driver.current_window_handle == self._handle

    @property
    def title(self) -> str:
        with self._switched():
            return self._driver.title

    @property
    def url(self) -> str:
        with self._switched():
            return self._driver.current_url

    def use(self) -> "Window":
        """Make this the window the driver talks to."""
        self._driver.switch_to.window(self._handle)
        return self

    def close(self) -> None:
        self.use()
        self._driver.close()
        logger.debug(f"Closed window {self._handle}")

    @contextlib.contextmanager
    def _switched(self) -> Iterator[None]:
        """Temporarily switch to this window, then back to the previous one."""
        previous = self._driver.current_window_handle
        if previous == self._handle:
            yield
            return

        self._driver.switch_to.window(self._handle)
        try:
            yield
        finally:
            self._driver.switch_to.window(previous)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Window):
            return NotImplemented
        return self._handle == other._handle

    def __hash__(self) -> int:
        return hash(self._handle)

    def __repr__(self) -> str:
        return f"<Window handle={self._handle!r}>"
