"""
Playwright fixtures for the playground E2E scenarios.

pytest-playwright owns the browser: it launches the engine chosen with
``--browser``, gives each test a fresh context and page, and records
screenshots, video, and traces on failure. This module bridges that page
into the fixture registry: every test gets its own ``Scenario`` bound to
its own page, and each page object fixture below is built by the registry
on first request within that scenario.

Key Concepts Demonstrated:
- One isolated page (and scenario) per test
- Page objects composed by an explicit registry, exposed as pytest fixtures
- Outcome reporting into scenario hooks (failure screenshots, step logs)
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
from playwright.sync_api import Page

from playground.catalog import build_registry
from playground.config import Config, get_config
from playground.data import PlaygroundData
from playground.live_site import wait_for_site
from playground.pages import DashboardPage, DatePickerPage, FormLayoutPage, TreeGridPage
from playground.registry import FAILED, PASSED, SKIPPED, FixtureRegistry, Scenario


@pytest.fixture(scope="session")
def settings() -> type[Config]:
    """Run configuration for this test process."""
    return get_config()


@pytest.fixture(scope="session")
def fixture_registry(settings: type[Config]) -> FixtureRegistry:
    """Registry built once per test process (once per xdist worker)."""
    return build_registry(settings)


@pytest.fixture(scope="session")
def live_site(settings: type[Config]) -> str:
    """Base URL of the site, once it answers."""
    wait_for_site(settings.BASE_URL, timeout=settings.SCENARIO_TIMEOUT)
    return settings.BASE_URL


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict) -> dict:
    return {
        **browser_context_args,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


def _outcome(item: pytest.Item) -> str:
    reports = [getattr(item, f"rep_{when}", None) for when in ("setup", "call")]
    if any(report is not None and report.failed for report in reports):
        return FAILED
    if any(report is not None and report.skipped for report in reports):
        return SKIPPED
    return PASSED


@pytest.fixture
def scenario(
    request: pytest.FixtureRequest, page: Page, fixture_registry: FixtureRegistry, settings: type[Config]
) -> Generator[Scenario, None, None]:
    """Per-test fixture scope bound to this test's page."""
    page.set_default_timeout(settings.ACTION_TIMEOUT_MS)
    current = fixture_registry.scenario(request.node.nodeid, page).open()
    yield current
    current.close(_outcome(request.node))


# -----------------------------------------------------------------------------
# Page Object Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def test_data(scenario: Scenario) -> PlaygroundData:
    return scenario.get("test_data")


@pytest.fixture
def dashboard(scenario: Scenario, live_site: str) -> DashboardPage:
    """Dashboard page object (not yet navigated)."""
    return scenario.get("dashboard")


@pytest.fixture
def iot_dashboard(scenario: Scenario, live_site: str) -> DashboardPage:
    """Dashboard opened with the dark theme applied."""
    return scenario.get("iot_dashboard")


@pytest.fixture
def form_layout_page(scenario: Scenario, live_site: str) -> FormLayoutPage:
    return scenario.get("form_layout_page")


@pytest.fixture
def date_picker_page(scenario: Scenario, live_site: str) -> DatePickerPage:
    return scenario.get("date_picker_page")


@pytest.fixture
def tree_grid_page(scenario: Scenario, live_site: str) -> TreeGridPage:
    return scenario.get("tree_grid_page")


# -----------------------------------------------------------------------------
# Outcome reporting
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase's report on the item so fixtures can read the outcome."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
