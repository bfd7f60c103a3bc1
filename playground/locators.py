"""
Declarative locators for page objects.

A selector describes *how* to find an element without touching the page.
Four strategies are supported, listed from the most to the least stable:

- ``ByRole``: accessible role plus accessible name
- ``ByPlaceholder``: placeholder text of an input
- ``ByText``: visible text content
- ``ByXPath``: structural path, optionally pinned to a 1-based position
  among its matches

``Nth`` pins any of the other strategies to a position the same way.

Every selector resolves through the same ``resolve(page)`` call into a lazy
Playwright ``Locator``. An ``Element`` binds a selector to one page handle
and is what page objects expose; its actions wait for the target to become
actionable up to a bounded timeout and translate engine failures into the
typed errors of :mod:`playground.errors`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeVar

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from playground.errors import AmbiguousMatchError, ElementNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 10_000

T = TypeVar("T")


# -----------------------------------------------------------------------------
# Selection strategies
# -----------------------------------------------------------------------------

def xpath_literal(value: str) -> str:
    """
    Quote ``value`` as an XPath string literal.

    XPath 1.0 has no escape sequences, so a value holding both quote kinds
    is assembled with ``concat()``.
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{part}'" for part in parts) + ")"


@dataclass(frozen=True)
class Selector(ABC):
    """Base class for selection strategies."""

    @abstractmethod
    def resolve(self, page: Page) -> Locator:
        """Lazy engine locator for this strategy."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable form used in logs and error messages."""

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class ByRole(Selector):
    role: str
    name: str | None = None
    exact: bool = False

    def resolve(self, page: Page) -> Locator:
        if self.name is None:
            return page.get_by_role(self.role)
        return page.get_by_role(self.role, name=self.name, exact=self.exact)

    def describe(self) -> str:
        if self.name is None:
            return f"role={self.role}"
        return f"role={self.role}[name={self.name!r}]"


@dataclass(frozen=True)
class ByPlaceholder(Selector):
    text: str
    exact: bool = False

    def resolve(self, page: Page) -> Locator:
        return page.get_by_placeholder(self.text, exact=self.exact)

    def describe(self) -> str:
        return f"placeholder={self.text!r}"


@dataclass(frozen=True)
class ByText(Selector):
    text: str
    exact: bool = False

    def resolve(self, page: Page) -> Locator:
        return page.get_by_text(self.text, exact=self.exact)

    def describe(self) -> str:
        return f"text={self.text!r}"


@dataclass(frozen=True)
class ByXPath(Selector):
    """
    Structural path, optionally disambiguated by position.

    ``nth`` follows XPath numbering (the first match is 1). The demo site
    repeats structurally identical widgets, so paths that are known to match
    several elements must carry an explicit position.
    """

    path: str
    nth: int | None = None

    def __post_init__(self):
        if self.nth is not None and self.nth < 1:
            raise ValueError(f"XPath positions start at 1, got {self.nth}")

    @property
    def expression(self) -> str:
        if self.nth is None:
            return self.path
        return f"({self.path})[{self.nth}]"

    def at(self, nth: int) -> "ByXPath":
        """Return the same path pinned to another position."""
        return replace(self, nth=nth)

    def resolve(self, page: Page) -> Locator:
        return page.locator(f"xpath={self.expression}")

    def describe(self) -> str:
        return f"xpath={self.expression}"


@dataclass(frozen=True)
class Nth(Selector):
    """Any other strategy pinned to a 1-based position among its matches."""

    base: Selector
    index: int

    def __post_init__(self):
        if self.index < 1:
            raise ValueError(f"positions start at 1, got {self.index}")

    def resolve(self, page: Page) -> Locator:
        return self.base.resolve(page).nth(self.index - 1)

    def describe(self) -> str:
        return f"{self.base.describe()} >> nth={self.index}"


# -----------------------------------------------------------------------------
# Bound element
# -----------------------------------------------------------------------------

class Element:
    """
    A selector bound to a page handle.

    Page objects bind their elements through ``Element.owned``, which looks
    the page up on the owner at every action; once the owner is released its
    elements raise ``ScenarioClosedError`` instead of driving the old page.

    Construction never queries the page. Each action resolves the selector
    again, so an ``Element`` stays valid across re-renders of the DOM.

    An ``Element`` has no truth value: ``assert element`` would test the
    handle rather than the page, so it raises ``TypeError``. Read the state
    explicitly with ``text()``, ``is_visible()`` or ``count()``.
    """

    def __init__(self, page: Page, selector: Selector, timeout: float = DEFAULT_TIMEOUT_MS):
        self._page_source: Callable[[], Page] = lambda: page
        self.selector = selector
        self.timeout = timeout

    @classmethod
    def owned(
        cls, page_source: Callable[[], Page], selector: Selector, timeout: float = DEFAULT_TIMEOUT_MS
    ) -> "Element":
        """Bind a selector to whatever page ``page_source`` returns at action time."""
        element = cls(None, selector, timeout)
        element._page_source = page_source
        return element

    def __repr__(self) -> str:
        return f"Element({self.selector.describe()})"

    def __bool__(self) -> bool:
        raise TypeError(
            f"{self!r} has no truth value; read text(), is_visible() or count() instead"
        )

    def nth(self, index: int) -> "Element":
        """The same element pinned to its ``index``-th match (1-based)."""
        if isinstance(self.selector, ByXPath):
            selector: Selector = self.selector.at(index)
        else:
            selector = Nth(self.selector, index)
        return Element.owned(self._page_source, selector, self.timeout)

    @property
    def locator(self) -> Locator:
        """The engine locator for this element (lazy, no DOM query)."""
        return self.selector.resolve(self._page_source())

    def _run(self, action: str, call: Callable[[Locator], T], timeout: float | None = None) -> T:
        timeout = self.timeout if timeout is None else timeout
        logger.debug("%s %s", action, self.selector)
        try:
            return call(self.locator)
        except PlaywrightTimeoutError as exc:
            raise ElementNotFoundError(self.selector.describe(), action, timeout) from exc
        except PlaywrightError as exc:
            if "strict mode violation" in (exc.message or ""):
                raise AmbiguousMatchError(self.selector.describe(), action) from exc
            raise

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def click(self, timeout: float | None = None) -> None:
        t = self.timeout if timeout is None else timeout
        self._run("click", lambda loc: loc.click(timeout=t), t)

    def fill(self, value: str, timeout: float | None = None) -> None:
        t = self.timeout if timeout is None else timeout
        self._run("fill", lambda loc: loc.fill(value, timeout=t), t)

    def scroll_into_view(self, timeout: float | None = None) -> None:
        t = self.timeout if timeout is None else timeout
        self._run(
            "scroll_into_view", lambda loc: loc.scroll_into_view_if_needed(timeout=t), t
        )

    def wait_visible(self, timeout: float | None = None) -> None:
        t = self.timeout if timeout is None else timeout
        self._run("wait_visible", lambda loc: loc.wait_for(state="visible", timeout=t), t)

    def wait_hidden(self, timeout: float | None = None) -> None:
        t = self.timeout if timeout is None else timeout
        self._run("wait_hidden", lambda loc: loc.wait_for(state="hidden", timeout=t), t)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def text(self, timeout: float | None = None) -> str:
        """Text content with surrounding whitespace removed."""
        t = self.timeout if timeout is None else timeout
        content = self._run("text", lambda loc: loc.text_content(timeout=t), t)
        return (content or "").strip()

    def inner_text(self, timeout: float | None = None) -> str:
        t = self.timeout if timeout is None else timeout
        return self._run("inner_text", lambda loc: loc.inner_text(timeout=t), t)

    def input_value(self, timeout: float | None = None) -> str:
        t = self.timeout if timeout is None else timeout
        return self._run("input_value", lambda loc: loc.input_value(timeout=t), t)

    def get_attribute(self, name: str, timeout: float | None = None) -> str | None:
        t = self.timeout if timeout is None else timeout
        return self._run("get_attribute", lambda loc: loc.get_attribute(name, timeout=t), t)

    def has_class(self, name: str, timeout: float | None = None) -> bool:
        classes = self.get_attribute("class", timeout=timeout) or ""
        return name in classes.split()

    def texts(self) -> list[str]:
        """Trimmed text of every current match; does not wait."""
        contents = self._run("texts", lambda loc: loc.all_text_contents())
        return [content.strip() for content in contents]

    def count(self) -> int:
        """Number of current matches; does not wait."""
        return self._run("count", lambda loc: loc.count())

    def is_visible(self) -> bool:
        """Visibility right now; does not wait."""
        return self._run("is_visible", lambda loc: loc.is_visible())
