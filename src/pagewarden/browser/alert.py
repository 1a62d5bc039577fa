"""
Alert - JavaScript alerts, confirms and prompts.
"""

from selenium.common.exceptions import NoAlertPresentException
from selenium.webdriver.common.alert import Alert as SeleniumAlert
from selenium.webdriver.remote.webdriver import WebDriver


class Alert:
    """Currently open JavaScript dialog of a browser."""

    def __init__(self, driver: WebDriver):
        self._driver = driver

    @property
    def _alert(self) -> SeleniumAlert:
        return self._driver.switch_to.alert

    @property
    def text(self) -> str:
        return self._alert.text

    @property
    def exists(self) -> bool:
        """Whether a dialog is currently open."""
        try:
            _ = self._alert
        except NoAlertPresentException:
            return False
        return True

    def ok(self) -> None:
        """Accept the dialog."""
        self._alert.accept()

    def close(self) -> None:
        """Dismiss the dialog."""
        self._alert.dismiss()

    def set(self, value: str) -> None:
        """Type value into a prompt."""
        self._alert.send_keys(value)
