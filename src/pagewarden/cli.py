"""
Pagewarden CLI - Command line interface.

Usage:
    pagewarden open www.example.com --headed
    pagewarden open https://example.com --fail-on "Server Error" --screenshot page.png
"""

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from pagewarden import __version__

# Load .env file if present
load_dotenv()

app = typer.Typer(
    name="pagewarden",
    help="Human-friendly browser automation with page checkers",
    add_completion=False,
)

console = Console()


def text_checker(needle: str):
    """Checker failing when needle appears in the page body text."""
    from pagewarden.exceptions import CheckerFailure

    def check(browser) -> None:
        if needle in browser.text:
            raise CheckerFailure(f"page contains {needle!r}")

    check.__qualname__ = f"text_checker({needle!r})"
    return check


@app.command("open")
def open_url(
    url: str = typer.Argument(..., help="URL to open"),
    browser_name: str | None = typer.Option(
        None, "--browser", "-b", help="Browser (chrome/firefox/edge/safari/remote)"
    ),
    headed: bool = typer.Option(False, "--headed", help="Run with visible browser"),
    fail_on: list[str] = typer.Option(
        [], "--fail-on", "-f", help="Fail when the page text contains this (repeatable)"
    ),
    screenshot: Path | None = typer.Option(None, "--screenshot", "-s", help="Save a PNG here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Open a URL, run checkers and print where the browser ended up."""
    from pagewarden.browser import Browser, BrowserConfig
    from pagewarden.exceptions import CheckerFailure
    from pagewarden.logging import logger, setup_logging

    setup_logging(level="DEBUG" if verbose else "INFO")

    config = BrowserConfig.from_env(name=browser_name, headless=False if headed else None)
    browser = Browser(config=config)

    try:
        for needle in fail_on:
            browser.register_checker(text_checker(needle))

        logger.navigation(url)
        try:
            final_url = browser.goto(url)
        except CheckerFailure as e:
            console.print(f"[red]✗ Checker failed: {e}[/red]")
            raise typer.Exit(1)

        console.print(f"URL: {final_url}")
        console.print(f"Title: {browser.title}")

        if screenshot:
            path = browser.screenshot.save(screenshot)
            console.print(f"Screenshot: {path}")

        logger.success("Page checks passed")

    finally:
        browser.close()


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Pagewarden v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
