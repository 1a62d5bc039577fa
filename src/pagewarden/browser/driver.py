"""
Driver factory - Launch selenium WebDriver instances from BrowserConfig.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from selenium import webdriver
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.remote.webdriver import WebDriver

from pagewarden.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pagewarden.browser.session import BrowserConfig

logger = logging.getLogger(__name__)


def _chromium_args(config: "BrowserConfig") -> list[str]:
    """Command line switches shared by Chrome and Edge."""
    width, height = config.window_size
    args = [
        f"--window-size={width},{height}",
        "--no-first-run",
        "--no-default-browser-check",
        "--disable-extensions",
        "--disable-popup-blocking",
        "--disable-translate",
        "--disable-sync",
    ]

    if config.headless:
        args.append("--headless=new")

    if config.user_data_dir:
        args.append(f"--user-data-dir={config.user_data_dir}")

    args.extend(config.args)
    return args


def _apply_args(options: ArgOptions, args: list[str]) -> ArgOptions:
    for arg in args:
        options.add_argument(arg)
    return options


def _chrome(config: "BrowserConfig") -> WebDriver:
    options = _apply_args(webdriver.ChromeOptions(), _chromium_args(config))
    return webdriver.Chrome(options=options)


def _edge(config: "BrowserConfig") -> WebDriver:
    options = _apply_args(webdriver.EdgeOptions(), _chromium_args(config))
    return webdriver.Edge(options=options)


def _firefox_args(config: "BrowserConfig") -> list[str]:
    width, height = config.window_size
    args = [f"--width={width}", f"--height={height}"]

    if config.headless:
        args.append("-headless")

    if config.user_data_dir:
        args.extend(["-profile", str(config.user_data_dir)])

    args.extend(config.args)
    return args


def _firefox(config: "BrowserConfig") -> WebDriver:
    options = _apply_args(webdriver.FirefoxOptions(), _firefox_args(config))
    return webdriver.Firefox(options=options)


def _safari(config: "BrowserConfig") -> WebDriver:
    if config.headless:
        logger.warning("Safari does not support headless mode, starting headed")
    return webdriver.Safari()


def _remote_options(config: "BrowserConfig") -> ArgOptions:
    """Capabilities for the browser requested from a remote grid."""
    name = config.remote_browser
    if name == "chrome":
        return _apply_args(webdriver.ChromeOptions(), _chromium_args(config))
    if name == "edge":
        return _apply_args(webdriver.EdgeOptions(), _chromium_args(config))
    if name == "firefox":
        return _apply_args(webdriver.FirefoxOptions(), _firefox_args(config))
    if name == "safari":
        return webdriver.SafariOptions()
    raise ConfigurationError(
        f"unsupported remote browser {name!r}, expected one of: chrome, edge, firefox, safari"
    )


def _remote(config: "BrowserConfig") -> WebDriver:
    if not config.remote_url:
        raise ConfigurationError("remote browser requires remote_url")

    options = _remote_options(config)
    logger.debug(f"Requesting {config.remote_browser} from {config.remote_url}")
    return webdriver.Remote(command_executor=config.remote_url, options=options)


DRIVER_BUILDERS: dict[str, Callable[["BrowserConfig"], WebDriver]] = {
    "chrome": _chrome,
    "edge": _edge,
    "firefox": _firefox,
    "safari": _safari,
    "remote": _remote,
}


def create_driver(config: "BrowserConfig") -> WebDriver:
    """
    Start a selenium driver for config.name.

    Args:
        config: Browser configuration

    Returns:
        Started WebDriver

    Raises:
        ConfigurationError: If the browser name is not supported
    """
    builder = DRIVER_BUILDERS.get(config.name)
    if builder is None:
        supported = ", ".join(sorted(DRIVER_BUILDERS))
        raise ConfigurationError(
            f"unsupported browser {config.name!r}, expected one of: {supported}"
        )

    logger.info(f"Starting {config.name} driver (headless={config.headless})")
    driver = builder(config)
    driver.set_page_load_timeout(config.page_load_timeout)
    return driver
