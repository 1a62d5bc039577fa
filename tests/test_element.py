"""Unit tests for typed element wrappers."""

from unittest.mock import MagicMock

import pytest
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from pagewarden.browser import Browser
from pagewarden.browser.element import (
    Anchor,
    Button,
    Element,
    Form,
    Image,
    Input,
    Option,
    Select,
    TextArea,
)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _handle(tag: str = "div", attributes: dict | None = None) -> MagicMock:
    handle = MagicMock(spec=WebElement)
    handle.tag_name = tag
    attributes = attributes or {}
    handle.get_attribute.side_effect = attributes.get
    return handle


def _browser() -> Browser:
    return Browser(driver=MagicMock(spec=WebDriver))


# ── Element ───────────────────────────────────────────────────────────────────


class TestElement:
    def setup_method(self):
        self.browser = _browser()

    def test_basic_accessors(self):
        handle = _handle("DIV", {"id": "main", "class": "content wide"})
        handle.text = "Hello"
        element = Element(self.browser, handle)

        assert element.tag_name == "div"
        assert element.text == "Hello"
        assert element.id == "main"
        assert element.class_name == "content wide"
        assert element.attribute_value("missing") is None

    def test_html_goes_through_owning_browser(self):
        handle = _handle("p")
        self.browser.driver.execute_script.return_value = "<p>hi</p>"
        element = Element(self.browser, handle)

        assert element.html == "<p>hi</p>"
        self.browser.driver.execute_script.assert_called_once_with(
            "return arguments[0].outerHTML", handle
        )

    def test_click_and_send_keys_delegate(self):
        handle = _handle("div")
        element = Element(self.browser, handle)

        element.click()
        element.send_keys("abc")

        handle.click.assert_called_once()
        handle.send_keys.assert_called_once_with("abc")

    @pytest.mark.parametrize(
        "method, chain_method",
        [
            ("double_click", "double_click"),
            ("right_click", "context_click"),
            ("hover", "move_to_element"),
        ],
    )
    def test_pointer_actions_use_action_chains(self, monkeypatch, method, chain_method):
        chains = MagicMock()
        monkeypatch.setattr("pagewarden.browser.element.ActionChains", chains)
        handle = _handle("div")

        getattr(Element(self.browser, handle), method)()

        chains.assert_called_once_with(self.browser.driver)
        getattr(chains.return_value, chain_method).assert_called_once_with(handle)
        getattr(chains.return_value, chain_method).return_value.perform.assert_called_once()

    def test_equality_by_handle(self):
        handle = _handle("a")
        assert Element(self.browser, handle) == Anchor(self.browser, handle)
        assert Element(self.browser, handle) != Element(self.browser, _handle("a"))
        assert len({Element(self.browser, handle), Element(self.browser, handle)}) == 1


# ── Typed wrappers ────────────────────────────────────────────────────────────


class TestTypedWrappers:
    def setup_method(self):
        self.browser = _browser()

    def test_anchor_href(self):
        link = Anchor(self.browser, _handle("a", {"href": "https://example.com/"}))
        assert link.href == "https://example.com/"

    def test_button_value(self):
        assert Button(self.browser, _handle("button", {"value": "Go"})).value == "Go"

    def test_input_type_defaults_to_text(self):
        assert Input(self.browser, _handle("input")).type == "text"
        assert Input(self.browser, _handle("input", {"type": "EMAIL"})).type == "email"

    @pytest.mark.parametrize("cls, tag", [(Input, "input"), (TextArea, "textarea")])
    def test_set_clears_then_types(self, cls, tag):
        handle = _handle(tag, {"value": "old"})
        field = cls(self.browser, handle)

        assert field.value == "old"
        field.set("new text")

        handle.clear.assert_called_once()
        handle.send_keys.assert_called_once_with("new text")

    def test_option_select_clicks_only_when_unselected(self):
        handle = _handle("option", {"value": "1"})
        handle.is_selected.return_value = False
        option = Option(self.browser, handle)

        option.select()
        handle.is_selected.return_value = True
        option.select()

        assert option.value == "1"
        handle.click.assert_called_once()

    def test_select_options_are_wrapped(self):
        first, second = _handle("option"), _handle("option")
        first.is_selected.return_value = False
        second.is_selected.return_value = True
        handle = _handle("select")
        handle.find_elements.return_value = [first, second]
        select = Select(self.browser, handle)

        options = select.options

        handle.find_elements.assert_called_with(By.TAG_NAME, "option")
        assert all(isinstance(o, Option) for o in options)
        assert [o.wd for o in select.selected_options] == [second]

    def test_select_by_text_and_value(self, monkeypatch):
        selenium_select = MagicMock()
        monkeypatch.setattr("pagewarden.browser.element.SeleniumSelect", selenium_select)
        handle = _handle("select")
        select = Select(self.browser, handle)

        select.select("Two")
        select.select_value("3")

        selenium_select.assert_called_with(handle)
        selenium_select.return_value.select_by_visible_text.assert_called_once_with("Two")
        selenium_select.return_value.select_by_value.assert_called_once_with("3")

    def test_image_attributes_and_size(self):
        handle = _handle("img", {"src": "/logo.png", "alt": "Logo"})
        handle.size = {"width": 120, "height": 40}
        image = Image(self.browser, handle)

        assert image.src == "/logo.png"
        assert image.alt == "Logo"
        assert (image.width, image.height) == (120, 40)

    def test_form_submit(self):
        handle = _handle("form")
        Form(self.browser, handle).submit()
        handle.submit.assert_called_once()
