"""
Typed failures raised by locators, page objects, and the fixture registry.

A generic test runner only has to catch these types to count, retry, and
report failed scenarios. Locator failures carry the selector that failed;
page object failures carry the operation name and chain the lower-level
cause through ``__cause__``.
"""

from __future__ import annotations


class PageObjectError(Exception):
    """Base class for every failure raised by the page object layer."""


class LocatorError(PageObjectError):
    """A locator could not be resolved into the element an action needs."""

    def __init__(self, selector: str, action: str, message: str):
        self.selector = selector
        self.action = action
        super().__init__(message)


class ElementNotFoundError(LocatorError):
    """The locator matched no element within its timeout."""

    def __init__(self, selector: str, action: str, timeout: float):
        self.timeout = timeout
        super().__init__(
            selector,
            action,
            f"{action}: no element matched {selector} within {timeout:g} ms",
        )


class AmbiguousMatchError(LocatorError):
    """A strategy that assumes uniqueness matched more than one element."""

    def __init__(self, selector: str, action: str):
        super().__init__(
            selector,
            action,
            f"{action}: {selector} matched more than one element; "
            "add an explicit position",
        )


class NavigationError(PageObjectError):
    """A navigation operation did not reach its destination state."""

    def __init__(self, operation: str, destination: str):
        self.operation = operation
        self.destination = destination
        super().__init__(f"{operation}: did not reach {destination}")


class InteractionError(PageObjectError):
    """A step of a composed interaction could not complete."""

    def __init__(self, operation: str, step: str, cause: Exception):
        self.operation = operation
        self.step = step
        self.cause = cause
        super().__init__(f"{operation}: step '{step}' failed: {cause}")


class TextMismatchError(AssertionError):
    """Expected and actual values read from the page differ."""

    def __init__(self, what: str, expected: object, actual: object):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what}: expected {expected!r}, got {actual!r}")


class FixtureCycleError(PageObjectError):
    """The fixture dependency graph contains a cycle."""

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__("fixture dependency cycle: " + " -> ".join(self.cycle))


class UnknownFixtureError(KeyError):
    """A fixture name was requested that no factory provides."""

    def __init__(self, name: str, requested_by: str | None = None):
        self.name = name
        self.requested_by = requested_by
        detail = f"unknown fixture {name!r}"
        if requested_by:
            detail += f" (required by {requested_by!r})"
        super().__init__(detail)

    def __str__(self) -> str:
        return self.args[0]


class ScenarioClosedError(PageObjectError):
    """A scenario-scoped object was used after its scenario ended."""
