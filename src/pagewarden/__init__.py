"""
Pagewarden - Human-friendly browser automation.

A thin facade over selenium WebDriver that runs page checkers after
navigation and hands back typed element wrappers from scripts.

Usage:
    from pagewarden import Browser, CheckerFailure

    with Browser() as browser:
        @browser.register_checker
        def no_server_error(page):
            if "Server Error" in page.text:
                raise CheckerFailure("Application exception or 500 error!")

        browser.goto("www.example.com")
        heading = browser.execute_script("return document.querySelector('h1')")
        print(heading.text)
"""

__version__ = "0.1.0"

from pagewarden.browser import Browser, BrowserConfig, CheckerRegistry, Element, Window
from pagewarden.exceptions import (
    BrowserClosedError,
    BrowserError,
    CheckerFailure,
    ConfigurationError,
    InvalidCheckerError,
    PagewardenError,
    WaitTimeoutError,
)
from pagewarden.logging import logger, setup_logging

__all__ = [
    "__version__",
    "Browser",
    "BrowserConfig",
    "CheckerRegistry",
    "Element",
    "Window",
    "PagewardenError",
    "ConfigurationError",
    "BrowserError",
    "BrowserClosedError",
    "InvalidCheckerError",
    "CheckerFailure",
    "WaitTimeoutError",
    "setup_logging",
    "logger",
]
