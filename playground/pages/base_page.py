"""
Base Page class for the Page Object Model.

This class provides the functionality shared by all page objects: binding
declarative locators to the page handle, navigation, waits, and the two
context managers that give page object failures their operation context.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Eager binding of locators, lazy resolution against the DOM
- Wrapping low-level failures with operation context (wrap, don't swallow)
- Releasing the page handle when the owning scenario ends
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager

from playwright.sync_api import Page, expect
from playwright.sync_api import Error as PlaywrightError

from playground.errors import (
    InteractionError,
    LocatorError,
    NavigationError,
    ScenarioClosedError,
)
from playground.locators import DEFAULT_TIMEOUT_MS, Element, Selector

logger = logging.getLogger(__name__)


class BasePage:
    """
    Base class for all page objects.

    A page object is bound to exactly one page handle for its whole
    lifetime and holds nothing besides that handle and its elements.

    Attributes:
        base_url: Root URL of the site under test.
        timeout: Bounded wait, in milliseconds, for every element action.
    """

    def __init__(self, page: Page, base_url: str = "", timeout: float = DEFAULT_TIMEOUT_MS):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: Base URL of the application.
            timeout: Per-action timeout in milliseconds.
        """
        self._page: Page | None = page
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def __repr__(self) -> str:
        state = "released" if self.released else "bound"
        return f"{type(self).__name__}({state})"

    # -------------------------------------------------------------------------
    # Page handle
    # -------------------------------------------------------------------------

    @property
    def page(self) -> Page:
        if self._page is None:
            raise ScenarioClosedError(
                f"{type(self).__name__} was released with its scenario"
            )
        return self._page

    @property
    def released(self) -> bool:
        return self._page is None

    def release(self) -> None:
        """Drop the page handle; any later use raises ``ScenarioClosedError``."""
        self._page = None

    def element(self, selector: Selector, timeout: float | None = None) -> Element:
        """Bind a selector to this page. Performs no DOM query."""
        # Looked up per action; raises ScenarioClosedError once released.
        return Element.owned(
            lambda: self.page, selector, self.timeout if timeout is None else timeout
        )

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> None:
        """
        Navigate to a specific path.

        Args:
            path: URL path relative to base URL.

        Raises:
            NavigationError: If the page cannot be loaded.
        """
        url = f"{self.base_url}{path}"
        logger.info("Navigating to %s", url)
        with self.navigation("navigate_to", url):
            self.page.goto(url, timeout=self.timeout)

    def wait_for_page_load(self) -> None:
        """Wait for page to finish loading."""
        self.page.wait_for_load_state("networkidle", timeout=self.timeout)

    @contextmanager
    def navigation(self, operation: str, destination: str) -> Iterator[None]:
        """Turn a failure to reach ``destination`` into ``NavigationError``."""
        try:
            yield
        except (LocatorError, PlaywrightError) as exc:
            logger.info("%s failed to reach %s", operation, destination)
            raise NavigationError(operation, destination) from exc

    @contextmanager
    def interaction(self, operation: str, step: str) -> Iterator[None]:
        """Wrap a locator failure inside a composed operation."""
        try:
            yield
        except LocatorError as exc:
            raise InteractionError(operation, step, exc) from exc

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)), timeout=self.timeout)
