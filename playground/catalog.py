"""
Default fixture catalog for the playground suite.

``build_registry`` registers one factory per page object plus the shared
run settings and test data, and attaches the cross-cutting hooks that
every scenario gets.
"""

from __future__ import annotations

from pathlib import Path

from playground.config import Config
from playground.data import PlaygroundData, default_data
from playground.hooks import FailureScreenshotHook, StepLogHook
from playground.pages import DashboardPage, DatePickerPage, FormLayoutPage, TreeGridPage
from playground.registry import FixtureRegistry


def build_registry(settings: type[Config]) -> FixtureRegistry:
    """
    Build the registry used by one test process.

    Args:
        settings: Configuration class for the current environment.

    Returns:
        A registry with every page object fixture and both hooks.
    """
    registry = FixtureRegistry()

    @registry.fixture(name="settings")
    def _settings() -> type[Config]:
        return settings

    @registry.fixture
    def test_data() -> PlaygroundData:
        return default_data()

    @registry.fixture
    def dashboard(page, settings) -> DashboardPage:
        return DashboardPage(page, settings.BASE_URL, settings.ACTION_TIMEOUT_MS)

    @registry.fixture
    def iot_dashboard(dashboard) -> DashboardPage:
        """Dashboard opened and switched to the dark theme."""
        dashboard.open()
        dashboard.select_dark_theme()
        return dashboard

    @registry.fixture
    def form_layout_page(page, settings) -> FormLayoutPage:
        return FormLayoutPage(page, settings.BASE_URL, settings.ACTION_TIMEOUT_MS)

    @registry.fixture
    def date_picker_page(page, settings) -> DatePickerPage:
        return DatePickerPage(page, settings.BASE_URL, settings.ACTION_TIMEOUT_MS)

    @registry.fixture
    def tree_grid_page(page, settings) -> TreeGridPage:
        return TreeGridPage(page, settings.BASE_URL, settings.ACTION_TIMEOUT_MS)

    registry.add_hook(StepLogHook())
    registry.add_hook(FailureScreenshotHook(Path(settings.ARTIFACTS_DIR) / "screenshots"))
    return registry
