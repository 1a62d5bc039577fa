"""
Pagewarden Browser Module.

Provides the browser facade, checkers and typed element wrappers.
"""

from pagewarden.browser.alert import Alert
from pagewarden.browser.checkers import Checker, CheckerRegistry
from pagewarden.browser.cookies import Cookies
from pagewarden.browser.driver import create_driver
from pagewarden.browser.element import (
    Anchor,
    Body,
    Button,
    Element,
    ElementTypes,
    Form,
    Image,
    Input,
    Option,
    Select,
    TextArea,
    element_class_for,
    element_type,
    element_types,
)
from pagewarden.browser.screenshot import Screenshot
from pagewarden.browser.session import Browser, BrowserConfig, SessionState
from pagewarden.browser.wait import wait_until
from pagewarden.browser.window import Window
from pagewarden.browser.wrapping import unwrap_args, wrap_result

__all__ = [
    "Alert",
    "Anchor",
    "Body",
    "Browser",
    "BrowserConfig",
    "Button",
    "Checker",
    "CheckerRegistry",
    "Cookies",
    "Element",
    "ElementTypes",
    "Form",
    "Image",
    "Input",
    "Option",
    "Screenshot",
    "Select",
    "SessionState",
    "TextArea",
    "Window",
    "create_driver",
    "element_class_for",
    "element_type",
    "element_types",
    "unwrap_args",
    "wait_until",
    "wrap_result",
]
