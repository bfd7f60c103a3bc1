"""Dashboard page object: the IoT dashboard and the header theme switcher."""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from playground.locators import DEFAULT_TIMEOUT_MS, ByXPath, Element, xpath_literal
from playground.pages.base_page import BasePage

logger = logging.getLogger(__name__)


class DashboardPage(BasePage):
    """
    Page object for the IoT dashboard.

    Provides methods for:
    - Opening the dashboard
    - Switching the colour theme from the header dropdown
    """

    URL_PATH = "/pages/iot-dashboard"

    def __init__(self, page: Page, base_url: str = "", timeout: float = DEFAULT_TIMEOUT_MS):
        super().__init__(page, base_url, timeout)

        # The header and the dashboard cards both render "select-button"
        # dropdowns; the theme switcher is the first one.
        self.theme_dropdown = self.element(ByXPath("//button[@class='select-button']", nth=1))

    def theme_option(self, name: str) -> Element:
        """Locator for one entry of the opened theme dropdown."""
        return self.element(ByXPath(f"//nb-option[normalize-space()={xpath_literal(name)}]"))

    def open(self) -> "DashboardPage":
        """
        Navigate to the IoT dashboard.

        Returns:
            Self for method chaining.
        """
        self.navigate_to(self.URL_PATH)
        return self

    def select_theme(self, name: str) -> None:
        """
        Pick a theme from the header dropdown.

        Args:
            name: Visible option label, e.g. ``"Dark"``.
        """
        logger.info("Selecting theme %s", name)
        with self.interaction("select_theme", "open theme dropdown"):
            self.theme_dropdown.click()
        with self.interaction("select_theme", f"choose {name}"):
            self.theme_option(name).click()

    def select_dark_theme(self) -> None:
        self.select_theme("Dark")

    def current_theme(self) -> str:
        """Label shown on the theme dropdown."""
        return self.theme_dropdown.text()
