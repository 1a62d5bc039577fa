"""
Screenshot - Captures of the current page.
"""

import logging
from pathlib import Path

from selenium.webdriver.remote.webdriver import WebDriver

logger = logging.getLogger(__name__)


class Screenshot:
    def __init__(self, driver: WebDriver):
        self._driver = driver

    def png(self) -> bytes:
        """PNG image data."""
        return self._driver.get_screenshot_as_png()

    def base64(self) -> str:
        """PNG image data, base64 encoded."""
        return self._driver.get_screenshot_as_base64()

    def save(self, path: str | Path) -> Path:
        """
        Write the screenshot to a PNG file.

        Args:
            path: Destination file; parent directories are created

        Returns:
            Path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.png())
        logger.debug(f"Screenshot saved to {path}")
        return path
