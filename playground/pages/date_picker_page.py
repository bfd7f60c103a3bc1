"""
Datepicker Page Object.

Covers the three calendars of the Forms > Datepicker screen: the common
picker, the range picker, and the picker with disabled min/max values.

Day cells are parameterised locators: a day that the open calendar does not
render is reported as ``ElementNotFoundError`` straight from the locator, so
selecting an out-of-range day fails loudly instead of doing nothing.
"""

from __future__ import annotations

import logging

from playwright.sync_api import Page

from playground.assertions import expect_text
from playground.locators import DEFAULT_TIMEOUT_MS, ByPlaceholder, ByRole, ByXPath, Element, xpath_literal
from playground.pages.base_page import BasePage

logger = logging.getLogger(__name__)

COMMON_TITLE = "Common Datepicker"
RANGE_TITLE = "Datepicker With Range"
MIN_MAX_TITLE = "Datepicker With Disabled Min Max Values"

# Cells of the adjacent months carry an extra "bounding-month" class, which
# breaks these class prefixes and keeps the day numbers unique.
RANGE_DAY_CELL = "//nb-calendar-range-day-cell[contains(@class, 'range-cell day-cell ng')]"
DAY_CELL = "//nb-calendar-day-cell[contains(@class, 'day-cell ng-star-inserted')]"


def _has_class(name: str) -> str:
    return f"contains(concat(' ', normalize-space(@class), ' '), ' {name} ')"


class DatePickerPage(BasePage):
    """
    Page object for the Forms > Datepicker screen.

    Provides methods for:
    - Opening the screen from the side menu
    - Reading and asserting the card titles
    - Picking dates in each of the three calendars
    """

    def __init__(self, page: Page, base_url: str = "", timeout: float = DEFAULT_TIMEOUT_MS):
        super().__init__(page, base_url, timeout)

        self.date_picker_menu = self.element(ByRole("link", name="Datepicker"))

        # Common datepicker
        self.common_title_header = self.element(ByXPath(f"//nb-card-header[text()='{COMMON_TITLE}']"))
        self.common_input = self.element(ByRole("textbox", name="Form Picker"))
        self.common_selected_day = self.element(
            ByXPath("//nb-calendar-day-cell[contains(@class, 'selected day-cell')]")
        )

        # Datepicker with range
        self.range_title_header = self.element(ByXPath(f"//nb-card-header[text()='{RANGE_TITLE}']"))
        self.range_input = self.element(ByPlaceholder("Range Picker"))
        self.range_start_cell = self.element(ByXPath(f"{RANGE_DAY_CELL}[{_has_class('start')}]"))
        self.range_end_cell = self.element(ByXPath(f"{RANGE_DAY_CELL}[{_has_class('end')}]"))

        # Datepicker with disabled min max values
        self.min_max_title_header = self.element(ByXPath(f"//nb-card-header[text()='{MIN_MAX_TITLE}']"))
        self.min_max_input = self.element(ByRole("textbox", name="Min Max Picker"))

    def range_day(self, day: str) -> Element:
        """Day cell of the open range calendar."""
        return self.element(ByXPath(f"{RANGE_DAY_CELL}//div[normalize-space(text())={xpath_literal(day)}]"))

    def min_max_day(self, day: str) -> Element:
        """Day cell of the open min/max calendar."""
        return self.element(ByXPath(f"{DAY_CELL}//div[normalize-space(text())={xpath_literal(day)}]"))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def goto_date_picker_menu(self) -> None:
        """Open Datepicker from the expanded Forms submenu."""
        with self.navigation("goto_date_picker_menu", f"'{COMMON_TITLE}' card"):
            self.date_picker_menu.click()
            self.common_title_header.wait_visible()

    # -------------------------------------------------------------------------
    # Titles
    # -------------------------------------------------------------------------

    def common_title(self) -> str:
        return self.common_title_header.inner_text().strip()

    def range_title(self) -> str:
        return self.range_title_header.inner_text().strip()

    def min_max_title(self) -> str:
        return self.min_max_title_header.inner_text().strip()

    def assert_titles(self) -> None:
        """Assert that all three calendar cards carry their expected titles."""
        for title, expected in (
            (self.common_title(), COMMON_TITLE),
            (self.range_title(), RANGE_TITLE),
            (self.min_max_title(), MIN_MAX_TITLE),
        ):
            logger.info("Datepicker type: %s", title)
            expect_text(title, expected, what="datepicker title")

    # -------------------------------------------------------------------------
    # Selection
    # -------------------------------------------------------------------------

    def select_date_common(self, date: str) -> str:
        """
        Type a date into the common picker and confirm it in the calendar.

        Args:
            date: Date in the picker's display format, e.g. ``"Dec 31, 2025"``.

        Returns:
            The day number of the cell the calendar marked as selected.
        """
        with self.interaction("select_date_common", "type date"):
            self.common_input.fill(date)
        selected = self.common_selected_day.text()
        logger.info("Selected date: %s", selected)
        self.common_selected_day.click()
        return selected

    def select_date_range(self, start: str, end: str) -> None:
        """
        Pick a range in the current month of the range calendar.

        Args:
            start: Day number of the first day, e.g. ``"1"``.
            end: Day number of the last day, e.g. ``"31"``.

        Raises:
            ElementNotFoundError: If either day is not rendered this month.
        """
        with self.interaction("select_date_range", "open calendar"):
            self.range_input.click()
        self.range_day(start).click()
        logger.info("Start date: %s", start)
        self.range_day(end).click()
        logger.info("End date: %s", end)

    def select_date_min_max(self, day: str) -> None:
        """Pick a day in the calendar whose out-of-bounds days are disabled."""
        with self.interaction("select_date_min_max", "open calendar"):
            self.min_max_input.click()
        self.min_max_day(day).click()
        logger.info("Selected date: %s", day)

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def common_value(self) -> str:
        return self.common_input.input_value()

    def range_value(self) -> str:
        return self.range_input.input_value()

    def min_max_value(self) -> str:
        return self.min_max_input.input_value()

    def range_boundaries(self) -> tuple[str, str]:
        """
        Reopen the range calendar and read the cells marked start and end.

        Returns:
            Day numbers of the start and end cells.
        """
        with self.interaction("range_boundaries", "open calendar"):
            self.range_input.click()
        return self.range_start_cell.text(), self.range_end_cell.text()
