"""
Result wrapping - Typed elements in script results.

Script results come back from the driver as plain values, lists, dicts
and native WebElements. wrap_result walks such a value and replaces every
WebElement with the typed wrapper registered for its tag name, keeping
the surrounding structure intact.
"""

from typing import TYPE_CHECKING, Any

from selenium.webdriver.remote.webelement import WebElement

from pagewarden.browser.element import Element, ElementTypes, element_types

if TYPE_CHECKING:
    from pagewarden.browser.session import Browser


def wrap_element(
    element: WebElement, browser: "Browser", types: ElementTypes | None = None
) -> Element:
    """Build the typed wrapper for a native element."""
    element_class = (types or element_types).lookup(element.tag_name)
    return element_class(browser, element)


def wrap_result(value: Any, browser: "Browser", types: ElementTypes | None = None) -> Any:
    """
    Replace native elements in a script result with typed wrappers.

    Lists and tuples keep their type, length and order; dicts keep their
    keys and key order. Any other value is returned as is.

    Args:
        value: Raw value returned by the driver
        browser: Owning browser, bound into every wrapper
        types: Tag name lookup (defaults to the global registry)

    Returns:
        Value of the same shape with elements wrapped
    """
    if isinstance(value, WebElement):
        return wrap_element(value, browser, types)
    if isinstance(value, list):
        return [wrap_result(item, browser, types) for item in value]
    if isinstance(value, tuple):
        return tuple(wrap_result(item, browser, types) for item in value)
    if isinstance(value, dict):
        return {key: wrap_result(item, browser, types) for key, item in value.items()}
    return value


def unwrap_args(args: Any) -> Any:
    """Inverse of wrap_result for script arguments: wrappers become native elements."""
    if isinstance(args, Element):
        return args.wd
    if isinstance(args, list):
        return [unwrap_args(arg) for arg in args]
    if isinstance(args, tuple):
        return tuple(unwrap_args(arg) for arg in args)
    if isinstance(args, dict):
        return {key: unwrap_args(arg) for key, arg in args.items()}
    return args
