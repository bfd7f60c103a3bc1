"""
Tree Grid Page Object.

The tree grid lists folders (Projects, Reports, Other) whose child rows are
only rendered while the folder is expanded. Every locator here is scoped to
a row by its name rather than by a global cell index, so reading a
collapsed row fails with ``ElementNotFoundError`` instead of silently
returning the cells of whatever row moved into that position.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from playwright.sync_api import Page

from playground.locators import DEFAULT_TIMEOUT_MS, ByRole, ByXPath, Element, xpath_literal
from playground.pages.base_page import BasePage

logger = logging.getLogger(__name__)

CELL = "td[@role='gridcell']"


def _row_path(name: str) -> str:
    return f"//tr[{CELL}[1][contains(normalize-space(.), {xpath_literal(name)})]]"


@dataclass(frozen=True)
class TreeGridRow:
    """Cells of one rendered tree grid row."""

    name: str
    size: str
    kind: str


class TreeGridPage(BasePage):
    """
    Page object for the Tables & Data > Tree Grid screen.

    Provides methods for:
    - Opening the screen and searching
    - Expanding and collapsing folder rows
    - Reading the name, size, and kind of a rendered row
    """

    URL_PATH = "/pages/tables/tree-grid"

    def __init__(self, page: Page, base_url: str = "", timeout: float = DEFAULT_TIMEOUT_MS):
        super().__init__(page, base_url, timeout)

        self.search_field = self.element(ByRole("textbox", name="Search"))
        self.name_cells = self.element(ByXPath(f"//tr[{CELL}]/{CELL}[1]"))

    def toggle(self, name: str) -> Element:
        """Expand/collapse button of the named row."""
        return self.element(ByXPath(f"{_row_path(name)}//button", nth=1))

    def cell(self, name: str, column: int) -> Element:
        """Grid cell of the named row; ``column`` starts at 1."""
        return self.element(ByXPath(f"{_row_path(name)}/{CELL}", nth=column))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def open(self) -> "TreeGridPage":
        self.navigate_to(self.URL_PATH)
        return self

    def expand_row(self, name: str, child: str | None = None) -> None:
        """
        Expand a folder row.

        Args:
            name: Name of the folder row, e.g. ``"Projects"``.
            child: Optional child row name to wait for once expanded.

        Raises:
            NavigationError: If the row cannot be toggled or ``child`` does
                not appear.
        """
        logger.info("Expanding row %s", name)
        with self.navigation("expand_row", f"'{name}' expanded"):
            self.toggle(name).click()
            if child is not None:
                self.cell(child, 1).wait_visible()

    def collapse_row(self, name: str, child: str | None = None) -> None:
        """Collapse a folder row, optionally waiting for ``child`` to disappear."""
        logger.info("Collapsing row %s", name)
        with self.navigation("collapse_row", f"'{name}' collapsed"):
            self.toggle(name).click()
            if child is not None:
                self.cell(child, 1).wait_hidden()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def search(self, term: str) -> None:
        with self.interaction("search", "search field"):
            self.search_field.fill(term)

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def row(self, name: str) -> TreeGridRow:
        """
        Read the cells of a rendered row.

        Raises:
            ElementNotFoundError: If the row is not rendered, e.g. because
                its folder is collapsed.
        """
        row = TreeGridRow(
            name=self.cell(name, 1).text(),
            size=self.cell(name, 2).text(),
            kind=self.cell(name, 3).text(),
        )
        logger.info("Row %s: size=%s kind=%s", row.name, row.size, row.kind)
        return row

    def is_row_visible(self, name: str) -> bool:
        return self.cell(name, 1).is_visible()

    def row_names(self) -> list[str]:
        """Names of all currently rendered rows, top to bottom."""
        return self.name_cells.texts()
