"""
Pagewarden Configuration.

Centralizes default values and configuration settings.
"""

# Browser Configuration
DEFAULT_BROWSER = "chrome"
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_PAGE_LOAD_TIMEOUT = 30.0

# Waiting
DEFAULT_WAIT_TIMEOUT = 5.0
DEFAULT_POLL_FREQUENCY = 0.1

# Navigation
DEFAULT_URL_SCHEME = "http"

# Environment variables read by BrowserConfig.from_env()
ENV_PREFIX = "PAGEWARDEN_"

