"""
Assertion helpers that keep handles and values apart.

Values read from the page (``str``) and handles to elements (``Element`` or
a raw Playwright ``Locator``) are not interchangeable. Comparing a handle
where a value was meant always "passes" or always fails regardless of what
the page shows, so every helper here checks the kind of its argument first
and raises ``TypeError`` on a mix-up.
"""

from __future__ import annotations

from playwright.sync_api import Locator, expect

from playground.errors import TextMismatchError
from playground.locators import Element


def _require_value(actual: object, what: str) -> str:
    if isinstance(actual, (Element, Locator)):
        raise TypeError(
            f"{what}: got an element handle ({actual!r}); "
            "compare the text read from it, e.g. element.text()"
        )
    if not isinstance(actual, str):
        raise TypeError(f"{what}: expected a str value, got {type(actual).__name__}")
    return actual


def _require_element(element: object, what: str) -> Element:
    if not isinstance(element, Element):
        raise TypeError(f"{what}: expected an Element, got {type(element).__name__}")
    return element


def expect_text(actual: str, expected: str, *, what: str = "text") -> None:
    """Assert that a value read from the page equals ``expected``."""
    value = _require_value(actual, what)
    if value != expected:
        raise TextMismatchError(what, expected, value)


def expect_contains(actual: str, fragment: str, *, what: str = "text") -> None:
    """Assert that a value read from the page contains ``fragment``."""
    value = _require_value(actual, what)
    if fragment not in value:
        raise TextMismatchError(what, f"...{fragment}...", value)


def expect_visible(element: Element, *, what: str | None = None) -> None:
    """Assert that an element becomes visible, using the engine's auto-wait."""
    el = _require_element(element, what or "visible")
    try:
        expect(el.locator).to_be_visible(timeout=el.timeout)
    except AssertionError as exc:
        raise TextMismatchError(what or str(el.selector), "visible", "not visible") from exc


def expect_hidden(element: Element, *, what: str | None = None) -> None:
    """Assert that an element becomes hidden or detached."""
    el = _require_element(element, what or "hidden")
    try:
        expect(el.locator).to_be_hidden(timeout=el.timeout)
    except AssertionError as exc:
        raise TextMismatchError(what or str(el.selector), "hidden", "visible") from exc
