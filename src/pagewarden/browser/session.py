"""
Browser Session - Human-friendly facade over selenium WebDriver.

Delegates navigation, scripting, windows and cookies to the driver,
runs registered checkers after page loads and wraps located elements
into typed Element objects.
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver

from pagewarden.browser.alert import Alert
from pagewarden.browser.checkers import Checker, CheckerRegistry
from pagewarden.browser.cookies import Cookies
from pagewarden.browser.driver import create_driver
from pagewarden.browser.element import Element
from pagewarden.browser.screenshot import Screenshot
from pagewarden.browser.wait import wait_until
from pagewarden.browser.window import Window
from pagewarden.browser.wrapping import unwrap_args, wrap_result
from pagewarden.config import (
    DEFAULT_BROWSER,
    DEFAULT_PAGE_LOAD_TIMEOUT,
    DEFAULT_WAIT_TIMEOUT,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
    ENV_PREFIX,
)
from pagewarden.exceptions import BrowserClosedError, BrowserError, ConfigurationError
from pagewarden.logging import PagewardenLogger
from pagewarden.utils.url import normalize_url

logger = logging.getLogger(__name__)
events = PagewardenLogger(__name__)


class BrowserConfig(BaseModel):
    """Configuration for browser session."""

    name: str = DEFAULT_BROWSER
    headless: bool = True
    user_data_dir: str | Path | None = None
    window_size: tuple[int, int] = (DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
    args: list[str] = Field(default_factory=list)
    remote_url: str | None = None
    remote_browser: str = DEFAULT_BROWSER

    # Timeouts
    page_load_timeout: float = DEFAULT_PAGE_LOAD_TIMEOUT
    wait_timeout: float = DEFAULT_WAIT_TIMEOUT

    @field_validator("name", "remote_browser")
    @classmethod
    def _lower_name(cls, value: str) -> str:
        return value.strip().lower()

    @classmethod
    def from_env(cls, **overrides: Any) -> "BrowserConfig":
        """
        Build config from PAGEWARDEN_* environment variables.

        Reads BROWSER, HEADLESS, REMOTE_URL, REMOTE_BROWSER and WINDOW_SIZE
        (e.g. "1280x800").
        Keyword overrides that are not None win over the environment.
        """
        data: dict[str, Any] = {}

        if name := os.getenv(f"{ENV_PREFIX}BROWSER"):
            data["name"] = name
        if headless := os.getenv(f"{ENV_PREFIX}HEADLESS"):
            data["headless"] = headless
        if remote_url := os.getenv(f"{ENV_PREFIX}REMOTE_URL"):
            data["remote_url"] = remote_url
        if remote_browser := os.getenv(f"{ENV_PREFIX}REMOTE_BROWSER"):
            data["remote_browser"] = remote_browser
        if window_size := os.getenv(f"{ENV_PREFIX}WINDOW_SIZE"):
            data["window_size"] = _parse_window_size(window_size)

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(data)


def _parse_window_size(value: str) -> tuple[int, int]:
    width, sep, height = value.lower().partition("x")
    if not sep or not width.strip().isdigit() or not height.strip().isdigit():
        raise ConfigurationError(f"invalid window size {value!r}, expected WIDTHxHEIGHT")
    return int(width), int(height)


class SessionState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class Browser(BaseModel):
    """
    The main class through which you control the browser.

    Usage:
        browser = Browser(config=BrowserConfig(headless=False))
        browser.goto("www.example.com")
        browser.title
        #=> "Example Domain"
        browser.close()

    An already started selenium driver can be wrapped instead:
        browser = Browser(driver=webdriver.Firefox())
    """

    model_config = {"arbitrary_types_allowed": True}

    config: BrowserConfig = Field(default_factory=BrowserConfig)

    # Private state
    _driver: Any = PrivateAttr(default=None)
    _checkers: CheckerRegistry = PrivateAttr(default_factory=CheckerRegistry)
    _cookies: Cookies | None = PrivateAttr(default=None)
    _state: SessionState = PrivateAttr(default=SessionState.OPEN)

    def __init__(self, driver: WebDriver | None = None, **data: Any):
        super().__init__(**data)

        if driver is None:
            driver = create_driver(self.config)
        elif not isinstance(driver, WebDriver):
            raise ConfigurationError(
                f"expected a selenium WebDriver, got {type(driver).__name__}"
            )

        self._driver = driver

    @classmethod
    def start(cls, url: str, name: str = DEFAULT_BROWSER, **config: Any) -> "Browser":
        """
        Create a browser and go to url.

        Usage:
            browser = Browser.start("www.google.com", "firefox", headless=False)
        """
        browser = cls(config=BrowserConfig(name=name, **config))
        browser.goto(url)
        return browser

    # ===== Lifecycle =====

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def exists(self) -> bool:
        """True until the browser is closed."""
        return self._state is SessionState.OPEN

    @property
    def driver(self) -> WebDriver:
        """Underlying selenium driver. Raises if the browser was closed."""
        self._ensure_open()
        return self._driver

    @property
    def browser(self) -> "Browser":
        return self

    def close(self) -> None:
        """Close the browser. Closing twice does nothing."""
        if self._state is SessionState.CLOSED:
            return

        self._driver.quit()
        self._state = SessionState.CLOSED
        logger.info("Browser closed")

    quit = close

    def assert_exists(self) -> bool:
        """
        Ensure the browser is usable and focused on the top-level document.

        Raises:
            BrowserClosedError: If the browser was closed
        """
        self._ensure_open()
        self._driver.switch_to.default_content()
        return True

    def _ensure_open(self) -> None:
        if self._state is SessionState.CLOSED:
            raise BrowserClosedError("browser was closed")

    # ===== Navigation =====

    def goto(self, url: str) -> str:
        """
        Go to the given URL and run checkers.

        Args:
            url: URL to open; "http://" is prefixed when it has no scheme

        Returns:
            The URL you end up at
        """
        self._ensure_open()
        url = normalize_url(url)

        logger.debug(f"Navigating to {url}", extra={"url": url})
        self._driver.get(url)
        self.run_checkers()

        return self.url

    def refresh(self) -> None:
        """Reload the current page and run checkers."""
        self._ensure_open()
        self._driver.refresh()
        self.run_checkers()

    def back(self) -> None:
        self._ensure_open()
        self._driver.back()

    def forward(self) -> None:
        self._ensure_open()
        self._driver.forward()

    @property
    def url(self) -> str:
        self._ensure_open()
        return self._driver.current_url

    @property
    def title(self) -> str:
        self._ensure_open()
        return self._driver.title

    @property
    def name(self) -> str:
        """Browser name reported by the driver, e.g. "chrome"."""
        self._ensure_open()
        return self._driver.name

    @property
    def text(self) -> str:
        """Text of the page body."""
        self._ensure_open()
        return self._driver.find_element(By.TAG_NAME, "body").text

    @property
    def html(self) -> str:
        """HTML source of the current page."""
        self._ensure_open()
        return self._driver.page_source

    @property
    def ready_state(self) -> str:
        return self.execute_script("return document.readyState")

    @property
    def status(self) -> str:
        """Text of the status bar."""
        return self.execute_script("return window.status;")

    def wait(self, timeout: float | None = None) -> None:
        """
        Wait until document.readyState is "complete".

        Raises:
            WaitTimeoutError: If timeout is exceeded
        """
        self._ensure_open()
        wait_until(
            self._driver,
            lambda: self.ready_state == "complete",
            timeout=self.config.wait_timeout if timeout is None else timeout,
            message="waiting for document.readyState == 'complete'",
        )

    # ===== Scripts =====

    def execute_script(self, script: str, *args: Any) -> Any:
        """
        Execute a JavaScript snippet.

        Use an explicit `return` to get a value back. Element arguments are
        passed to the page as DOM nodes, and DOM nodes in the result come
        back as typed Element wrappers.

        Usage:
            browser.execute_script("return arguments[0].innerHTML", span)
            #=> "Span innerHTML"
        """
        self._ensure_open()
        events.script(script)
        returned = self._driver.execute_script(script, *unwrap_args(args))
        return wrap_result(returned, self)

    @property
    def x(self) -> int:
        """Current horizontal content offset."""
        return self.execute_script("return window.pageXOffset")

    @property
    def y(self) -> int:
        """Current vertical content offset."""
        return self.execute_script("return window.pageYOffset")

    def scroll_to(self, x: int, y: int) -> None:
        """Scroll the document to the absolute position (x, y)."""
        self.execute_script(f"window.scrollTo({int(x)}, {int(y)})")

    def scroll(self, x: int, y: int) -> None:
        """Scroll the document by x and y pixels."""
        self.scroll_to(self.x + int(x), self.y + int(y))

    def scroll_right(self, n: int) -> None:
        self.scroll(n, 0)

    def scroll_left(self, n: int) -> None:
        self.scroll(-n, 0)

    def scroll_down(self, n: int) -> None:
        self.scroll(0, n)

    def scroll_up(self, n: int) -> None:
        self.scroll(0, -n)

    def window_open(self, url: str) -> None:
        """Open url in a new window; see windows()."""
        self.execute_script(f"window.open({json.dumps(url)}, '_blank')")

    # ===== Input, Elements, Windows =====

    def send_keys(self, *keys: str) -> None:
        """
        Send keystrokes to the currently active element.

        Usage:
            browser.send_keys("Pagewarden", Keys.RETURN)
        """
        self._ensure_open()
        self._driver.switch_to.active_element.send_keys(*keys)

    def element(self, tag_name: str) -> Element:
        """First element with tag_name, as its typed wrapper."""
        self._ensure_open()
        return wrap_result(self._driver.find_element(By.TAG_NAME, tag_name), self)

    def elements(self, tag_name: str) -> list[Element]:
        self._ensure_open()
        return wrap_result(self._driver.find_elements(By.TAG_NAME, tag_name), self)

    def windows(self) -> list[Window]:
        self._ensure_open()
        return [Window(self._driver, handle) for handle in self._driver.window_handles]

    def window(self, index: int | None = None, handle: str | None = None) -> Window:
        """
        Select a window by index or handle; the current window by default.

        The first, default window has index 0.

        Raises:
            BrowserError: If no such window exists
        """
        self._ensure_open()
        handles = self._driver.window_handles

        if handle is not None:
            if handle not in handles:
                raise BrowserError(f"no window with handle {handle!r}")
            return Window(self._driver, handle)

        if index is not None:
            try:
                return Window(self._driver, handles[index])
            except IndexError:
                raise BrowserError(f"no window at index {index}") from None

        return Window(self._driver, self._driver.current_window_handle)

    @property
    def alert(self) -> Alert:
        self._ensure_open()
        return Alert(self._driver)

    @property
    def screenshot(self) -> Screenshot:
        self._ensure_open()
        return Screenshot(self._driver)

    @property
    def cookies(self) -> Cookies:
        self._ensure_open()
        if self._cookies is None:
            self._cookies = Cookies(self._driver)
        return self._cookies

    # ===== Checkers =====

    def register_checker(self, checker: Checker | None = None) -> Any:
        """
        Add a checker run after goto() and refresh().

        Usable as a decorator as well:
            @browser.register_checker
            def no_server_error(page):
                if "Server Error" in page.text:
                    raise CheckerFailure("Application exception or 500 error!")

        Raises:
            InvalidCheckerError: If checker is not callable
        """
        if checker is None:
            return self._checkers.add
        return self._checkers.add(checker)

    def unregister_checker(self, checker: Checker) -> None:
        self._checkers.remove(checker)

    def run_checkers(self) -> None:
        """Run every checker in registration order; the first failure propagates."""
        self._checkers.run_all(self)

    @property
    def checkers(self) -> tuple[Checker, ...]:
        return tuple(self._checkers)

    # ===== Context Manager Support =====

    def __enter__(self) -> "Browser":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._state is SessionState.CLOSED:
            return "<Browser closed=True>"
        try:
            return f"<Browser url={self.url!r} title={self.title!r}>"
        except WebDriverException:
            return "<Browser closed=False>"
