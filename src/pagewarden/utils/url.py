"""
URL utilities for Pagewarden navigation.
"""

import re

from pagewarden.config import DEFAULT_URL_SCHEME

# "scheme://", e.g. "https://" or "chrome://"
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")
_OPAQUE_SCHEMES = ("about:", "data:", "javascript:", "file:", "blob:", "mailto:")


def has_scheme(url: str) -> bool:
    """Check whether a URL already names its scheme."""
    return bool(_SCHEME_RE.match(url)) or url.lower().startswith(_OPAQUE_SCHEMES)


def normalize_url(url: str, scheme: str = DEFAULT_URL_SCHEME) -> str:
    """
    Prefix a scheme onto a bare URL.

    Examples:
        normalize_url("www.example.com")      # "http://www.example.com"
        normalize_url("https://example.com")  # unchanged
        normalize_url("about:blank")          # unchanged
    """
    url = url.strip()
    if has_scheme(url):
        return url
    return f"{scheme}://{url}"
