"""
Fixtures for the offline unit tests.

No browser is started here. Page objects are exercised against
``FakePage``, a ``unittest.mock`` double of a Playwright page that hands
out one mock locator per selector and records every action in order.

Key Concepts Demonstrated:
- Test doubles with unittest.mock (MagicMock, spec, side_effect)
- Recording interactions to assert on their order
- Simulating engine failures without a browser
"""

from __future__ import annotations

from unittest.mock import DEFAULT, MagicMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from playground.locators import ByPlaceholder, ByRole, ByText, ByXPath, Selector

RECORDED_METHODS = ("click", "fill", "scroll_into_view_if_needed", "wait_for")


class FakePage:
    """
    Playwright page double keyed by selector description.

    ``fake.page`` is what page objects receive. ``fake.locator(selector)``
    returns the mock locator that page objects will get for that selector,
    so a test can preset return values or failures before acting.
    """

    def __init__(self):
        self.actions: list[tuple[str, str, tuple]] = []
        self._locators: dict[str, MagicMock] = {}

        self.page = MagicMock(spec=Page)
        self.page.locator.side_effect = lambda expression: self._get(
            ByXPath(expression.removeprefix("xpath=")).describe()
        )
        self.page.get_by_role.side_effect = lambda role, name=None, exact=False: self._get(
            ByRole(role, name, exact).describe()
        )
        self.page.get_by_placeholder.side_effect = lambda text, exact=False: self._get(
            ByPlaceholder(text, exact).describe()
        )
        self.page.get_by_text.side_effect = lambda text, exact=False: self._get(
            ByText(text, exact).describe()
        )

    def _get(self, key: str) -> MagicMock:
        if key not in self._locators:
            locator = MagicMock(name=key)
            for method in RECORDED_METHODS:
                getattr(locator, method).side_effect = self._recorder(key, method)
            self._locators[key] = locator
        return self._locators[key]

    def _recorder(self, key: str, method: str):
        def record(*args, **kwargs):
            self.actions.append((key, method, args))
            return DEFAULT

        return record

    def locator(self, selector: Selector) -> MagicMock:
        return self._get(selector.describe())

    def fail(self, selector: Selector, method: str, error: Exception) -> None:
        """Make ``method`` of the selector's locator raise ``error``."""
        getattr(self.locator(selector), method).side_effect = error

    def actions_of(self, method: str) -> list[tuple[str, tuple]]:
        return [(key, args) for key, name, args in self.actions if name == method]


@pytest.fixture
def fake_page() -> FakePage:
    """Fresh recording page double for each test."""
    return FakePage()


@pytest.fixture
def timeout_error() -> PlaywrightTimeoutError:
    return PlaywrightTimeoutError("Timeout 10000ms exceeded.")


@pytest.fixture
def strict_mode_error() -> PlaywrightError:
    return PlaywrightError(
        "Error: strict mode violation: locator('xpath=//input') resolved to 4 elements"
    )
