"""
Simple walkthrough of a Pagewarden browser session.

Run with:
    python examples/basic_session.py
"""

import tempfile

from pagewarden import Browser, BrowserConfig, CheckerFailure
from pagewarden.logging import setup_logging


def no_server_error(browser: Browser) -> None:
    """Fail any page load that lands on an error page."""
    if "Server Error" in browser.text:
        raise CheckerFailure("Application exception or 500 error!")


def main():
    print("\n=== Testing Browser Session ===\n")

    setup_logging(level="DEBUG")

    # Temp profile avoids conflicts with a running Chrome
    config = BrowserConfig(
        headless=False,
        window_size=(1280, 800),
        user_data_dir=tempfile.mkdtemp(prefix="pagewarden_chrome_"),
    )

    with Browser(config=config) as browser:
        browser.register_checker(no_server_error)

        print("Navigating to example.com...")
        url = browser.goto("example.com")
        print(f"✓ URL: {url}")
        print(f"✓ Title: {browser.title}")

        heading = browser.execute_script("return document.querySelector('h1')")
        print(f"✓ Heading: {heading.tag_name} {heading.text!r}")

        links = browser.execute_script("return {links: document.querySelectorAll('a')}")
        for link in links["links"]:
            print(f"  • {link.text}: {link.href}")

        browser.scroll_down(200)
        print(f"✓ Scrolled to y={browser.y}")

        screenshot = browser.screenshot.save("output/example.png")
        print(f"✓ Screenshot: {screenshot}")

        browser.refresh()
        print("✓ Refreshed, checkers passed")

    print("\n=== All done! ===\n")


if __name__ == "__main__":
    main()
