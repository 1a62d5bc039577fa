"""
Wait - Polling for page conditions.
"""

from collections.abc import Callable
from typing import TypeVar

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from pagewarden.config import DEFAULT_POLL_FREQUENCY, DEFAULT_WAIT_TIMEOUT
from pagewarden.exceptions import WaitTimeoutError

T = TypeVar("T")


def wait_until(
    driver: WebDriver,
    condition: Callable[[], T],
    timeout: float = DEFAULT_WAIT_TIMEOUT,
    message: str = "",
    poll_frequency: float = DEFAULT_POLL_FREQUENCY,
) -> T:
    """
    Poll condition until it returns a truthy value.

    Args:
        driver: Driver the wait is bound to
        condition: Zero-argument callable polled until truthy
        timeout: Seconds before giving up
        message: Description included in the timeout error
        poll_frequency: Seconds between polls

    Returns:
        The first truthy value returned by condition

    Raises:
        WaitTimeoutError: If timeout is exceeded
    """
    wait = WebDriverWait(driver, timeout, poll_frequency=poll_frequency)
    try:
        return wait.until(lambda _driver: condition(), message)
    except TimeoutException as e:
        detail = f", {message}" if message else ""
        raise WaitTimeoutError(f"timed out after {timeout} seconds{detail}") from e
