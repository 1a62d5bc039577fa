"""
Element - Typed wrappers around located page elements.

Each wrapper is bound to its owning browser and to the native selenium
WebElement it was built from. Wrapper classes are selected by tag name
through the ElementTypes registry; unknown tags get the generic Element.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support.select import Select as SeleniumSelect

if TYPE_CHECKING:
    from pagewarden.browser.session import Browser

logger = logging.getLogger(__name__)


class Element:
    """
    Generic page element.

    Used directly for any tag without a registered wrapper class.
    """

    def __init__(self, browser: "Browser", element: WebElement):
        self._browser = browser
        self._element = element

    @property
    def browser(self) -> "Browser":
        """Browser this element was located through."""
        return self._browser

    @property
    def wd(self) -> WebElement:
        """Native selenium element."""
        return self._element

    @property
    def tag_name(self) -> str:
        return self._element.tag_name.lower()

    @property
    def text(self) -> str:
        return self._element.text

    @property
    def html(self) -> str:
        """Outer HTML of the element."""
        return self._browser.execute_script("return arguments[0].outerHTML", self)

    @property
    def id(self) -> str | None:
        return self.attribute_value("id")

    @property
    def class_name(self) -> str | None:
        return self.attribute_value("class")

    def attribute_value(self, name: str) -> str | None:
        return self._element.get_attribute(name)

    def is_displayed(self) -> bool:
        return self._element.is_displayed()

    def is_enabled(self) -> bool:
        return self._element.is_enabled()

    def click(self) -> None:
        logger.debug(f"Click {self.tag_name}")
        self._element.click()

    def double_click(self) -> None:
        ActionChains(self._browser.driver).double_click(self._element).perform()

    def right_click(self) -> None:
        ActionChains(self._browser.driver).context_click(self._element).perform()

    def hover(self) -> None:
        ActionChains(self._browser.driver).move_to_element(self._element).perform()

    def focus(self) -> None:
        self._browser.execute_script("arguments[0].focus()", self)

    def send_keys(self, *keys: str) -> None:
        self._element.send_keys(*keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self._element == other._element

    def __hash__(self) -> int:
        return hash(self._element)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self._element.id!r}>"


class ElementTypes:
    """
    Tag name to wrapper class lookup.

    Tag names are matched case-insensitively. Lookups never fail: tags
    without a registered class resolve to the default class.
    """

    def __init__(self, default: type[Element]):
        self._default = default
        self._types: dict[str, type[Element]] = {}

    @property
    def default(self) -> type[Element]:
        return self._default

    def register(self, tag_name: str, element_class: type[Element]) -> None:
        self._types[tag_name.lower()] = element_class

    def lookup(self, tag_name: str | None) -> type[Element]:
        return self._types.get((tag_name or "").lower(), self._default)

    def __contains__(self, tag_name: str | None) -> bool:
        return (tag_name or "").lower() in self._types


# Global registry instance
element_types = ElementTypes(default=Element)


def element_type(*tag_names: str) -> Callable[[type[Element]], type[Element]]:
    """
    Class decorator registering a wrapper for one or more tag names.

    Usage:
        @element_type("a")
        class Anchor(Element):
            ...
    """

    def decorator(cls: type[Element]) -> type[Element]:
        for tag_name in tag_names:
            element_types.register(tag_name, cls)
        return cls

    return decorator


def element_class_for(tag_name: str | None) -> type[Element]:
    """Wrapper class for a tag name, falling back to Element."""
    return element_types.lookup(tag_name)


# ===== Typed Wrappers =====


@element_type("a")
class Anchor(Element):
    """Link element."""

    @property
    def href(self) -> str | None:
        return self.attribute_value("href")


@element_type("button")
class Button(Element):
    @property
    def value(self) -> str | None:
        return self.attribute_value("value")


class TextField(Element):
    """Shared behaviour of elements accepting typed text."""

    @property
    def value(self) -> str:
        return self.attribute_value("value") or ""

    def clear(self) -> None:
        self._element.clear()

    def set(self, text: str) -> None:
        """Replace the current value with text."""
        self.clear()
        self._element.send_keys(text)


@element_type("input")
class Input(TextField):
    @property
    def type(self) -> str:
        return (self.attribute_value("type") or "text").lower()


@element_type("textarea")
class TextArea(TextField):
    pass


@element_type("option")
class Option(Element):
    @property
    def value(self) -> str | None:
        return self.attribute_value("value")

    def is_selected(self) -> bool:
        return self._element.is_selected()

    def select(self) -> None:
        if not self.is_selected():
            self._element.click()


@element_type("select")
class Select(Element):
    """Drop-down list, driven through selenium's Select support class."""

    @property
    def _select(self) -> SeleniumSelect:
        return SeleniumSelect(self._element)

    @property
    def options(self) -> list[Any]:
        from pagewarden.browser.wrapping import wrap_result

        return wrap_result(self._element.find_elements(By.TAG_NAME, "option"), self._browser)

    @property
    def selected_options(self) -> list[Any]:
        return [option for option in self.options if option.is_selected()]

    @property
    def is_multiple(self) -> bool:
        return self._select.is_multiple

    def select(self, text: str) -> None:
        """Select option by visible text."""
        self._select.select_by_visible_text(text)

    def select_value(self, value: str) -> None:
        """Select option by value attribute."""
        self._select.select_by_value(value)

    def clear(self) -> None:
        """Deselect all options of a multi-select."""
        self._select.deselect_all()


@element_type("img")
class Image(Element):
    @property
    def src(self) -> str | None:
        return self.attribute_value("src")

    @property
    def alt(self) -> str | None:
        return self.attribute_value("alt")

    @property
    def width(self) -> int:
        return int(self._element.size["width"])

    @property
    def height(self) -> int:
        return int(self._element.size["height"])


@element_type("form")
class Form(Element):
    def submit(self) -> None:
        self._element.submit()


@element_type("body")
class Body(Element):
    pass
