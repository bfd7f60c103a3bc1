"""
Page objects and fixture composition for the playground E2E suite.

This package contains:
- locators: declarative selectors bound to a page as ``Element``s
- pages/: one page object per screen of the site
- registry: per-scenario fixture composition with guaranteed teardown
- catalog: the default registry wiring page objects to fixtures
- errors: the typed failures a test runner reports
"""

from playground.errors import (
    AmbiguousMatchError,
    ElementNotFoundError,
    FixtureCycleError,
    InteractionError,
    NavigationError,
    PageObjectError,
    ScenarioClosedError,
    TextMismatchError,
    UnknownFixtureError,
)
from playground.locators import ByPlaceholder, ByRole, ByText, ByXPath, Element, Nth
from playground.registry import FixtureRegistry, Scenario, ScenarioHook

__all__ = [
    "AmbiguousMatchError",
    "ByPlaceholder",
    "ByRole",
    "ByText",
    "ByXPath",
    "Element",
    "ElementNotFoundError",
    "FixtureCycleError",
    "FixtureRegistry",
    "InteractionError",
    "NavigationError",
    "Nth",
    "PageObjectError",
    "Scenario",
    "ScenarioClosedError",
    "ScenarioHook",
    "TextMismatchError",
    "UnknownFixtureError",
]
