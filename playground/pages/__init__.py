"""
Page Object Model (POM) classes for the playground site.

This package contains page objects that encapsulate page-specific
locators and interactions. The POM pattern provides:
- Separation of test logic from page details
- Reusable page interactions
- Maintainable test code (changes to UI only require updates in one place)
"""

from playground.pages.base_page import BasePage
from playground.pages.dashboard_page import DashboardPage
from playground.pages.date_picker_page import DatePickerPage
from playground.pages.form_layout_page import FormLayoutPage
from playground.pages.tree_grid_page import TreeGridPage, TreeGridRow

__all__ = [
    "BasePage",
    "DashboardPage",
    "DatePickerPage",
    "FormLayoutPage",
    "TreeGridPage",
    "TreeGridRow",
]
