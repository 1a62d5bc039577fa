"""
Cookies - Cookie management for the current page's domain.
"""

from datetime import datetime
from typing import Any

from selenium.webdriver.remote.webdriver import WebDriver


class Cookies:
    """
    Usage:
        browser.cookies.add("session", "abc123", path="/", secure=True)
        browser.cookies.get("session")["value"]
        browser.cookies.clear()
    """

    def __init__(self, driver: WebDriver):
        self._driver = driver

    def to_list(self) -> list[dict[str, Any]]:
        return self._driver.get_cookies()

    def get(self, name: str) -> dict[str, Any] | None:
        return self._driver.get_cookie(name)

    def add(
        self,
        name: str,
        value: str,
        path: str | None = None,
        domain: str | None = None,
        secure: bool | None = None,
        expires: datetime | int | None = None,
    ) -> None:
        """
        Add a cookie.

        Args:
            name: Cookie name
            value: Cookie value
            path: Cookie path
            domain: Cookie domain
            secure: Only send over HTTPS
            expires: Expiry as datetime or unix timestamp
        """
        cookie: dict[str, Any] = {"name": name, "value": value}

        if path is not None:
            cookie["path"] = path
        if domain is not None:
            cookie["domain"] = domain
        if secure is not None:
            cookie["secure"] = secure
        if expires is not None:
            if isinstance(expires, datetime):
                expires = int(expires.timestamp())
            cookie["expiry"] = expires

        self._driver.add_cookie(cookie)

    def delete(self, name: str) -> None:
        self._driver.delete_cookie(name)

    def clear(self) -> None:
        self._driver.delete_all_cookies()

    def __len__(self) -> int:
        return len(self.to_list())
