"""
Fixture registry: named factories composed per scenario.

A ``FixtureRegistry`` is built once per test process and handed to
whatever runs the scenarios. It maps fixture names to factories and holds
an ordered list of scenario hooks that apply to every scenario.

For each scenario the registry opens a ``Scenario``, which:

1. owns the page handle it was given (one per scenario, never shared),
2. builds each requested fixture at most once, resolving the factory's
   parameters as further fixture names (the pytest convention),
3. runs the hooks' ``before`` in order when it opens,
4. on close, whatever the outcome, runs the hooks' ``after`` in reverse,
   finishes generator fixtures in reverse construction order, and releases
   every object it built so nothing keeps a usable page handle.

Example:
    registry = FixtureRegistry()

    @registry.fixture
    def login_page(page):
        return LoginPage(page)

    with registry.scenario("test_login", page) as scenario:
        scenario.get("login_page").login("user", "secret")
"""

from __future__ import annotations

import inspect
import logging
import time
from collections.abc import Callable, Generator
from dataclasses import dataclass
from typing import Any

from playground.errors import FixtureCycleError, ScenarioClosedError, UnknownFixtureError

logger = logging.getLogger(__name__)

PAGE = "page"

PASSED = "passed"
FAILED = "failed"
SKIPPED = "skipped"
OUTCOMES = (PASSED, FAILED, SKIPPED)


@dataclass(frozen=True)
class FixtureDef:
    """A registered factory and the fixture names it depends on."""

    name: str
    factory: Callable[..., Any]
    params: tuple[str, ...]

    @property
    def is_generator(self) -> bool:
        return inspect.isgeneratorfunction(self.factory)


class ScenarioHook:
    """
    Cross-cutting behaviour applied to every scenario.

    Subclasses override ``before`` and/or ``after``. ``after`` runs even when
    the scenario failed, while the page handle is still usable.
    """

    def before(self, scenario: "Scenario") -> None:
        pass

    def after(self, scenario: "Scenario") -> None:
        pass


class FixtureRegistry:
    """Explicit registry of fixture factories and scenario hooks."""

    def __init__(self):
        self._defs: dict[str, FixtureDef] = {}
        self._hooks: list[ScenarioHook] = []

    def __contains__(self, name: str) -> bool:
        return name == PAGE or name in self._defs

    @property
    def names(self) -> list[str]:
        return sorted(self._defs)

    @property
    def hooks(self) -> tuple[ScenarioHook, ...]:
        return tuple(self._hooks)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, name: str, factory: Callable[..., Any]) -> FixtureDef:
        """
        Register a factory under ``name``.

        Args:
            name: Fixture name requested by scenarios.
            factory: Callable returning the fixture value, or a generator
                function that yields it once and cleans up afterwards.
                Its parameter names are the fixtures it depends on.

        Returns:
            The stored definition.

        Raises:
            ValueError: If the name is taken or the factory takes
                ``*args``/``**kwargs``.
        """
        if name in self:
            raise ValueError(f"fixture {name!r} is already registered")

        params = []
        for param in inspect.signature(factory).parameters.values():
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                raise ValueError(f"fixture {name!r}: factories cannot take *args or **kwargs")
            params.append(param.name)

        definition = FixtureDef(name=name, factory=factory, params=tuple(params))
        self._defs[name] = definition
        return definition

    def fixture(self, func: Callable[..., Any] | None = None, *, name: str | None = None):
        """Decorator form of :meth:`register`; the name defaults to the function's."""

        def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
            self.register(name or f.__name__, f)
            return f

        if func is not None:
            return decorator(func)
        return decorator

    def add_hook(self, hook: ScenarioHook) -> None:
        """Append a hook; hooks run in registration order."""
        self._hooks.append(hook)

    # -------------------------------------------------------------------------
    # Graph checks
    # -------------------------------------------------------------------------

    def definition(self, name: str, requested_by: str | None = None) -> FixtureDef:
        try:
            return self._defs[name]
        except KeyError:
            raise UnknownFixtureError(name, requested_by) from None

    def dependencies(self, name: str) -> tuple[str, ...]:
        if name == PAGE:
            return ()
        return self.definition(name).params

    def validate(self) -> None:
        """
        Check that every dependency exists and the graph is acyclic.

        Raises:
            UnknownFixtureError: A factory depends on an unregistered name.
            FixtureCycleError: Some fixture depends on itself transitively.
        """
        done: set[str] = set()

        def visit(name: str, path: list[str]) -> None:
            if name in done or name == PAGE:
                return
            if name in path:
                raise FixtureCycleError(path[path.index(name):] + [name])
            requester = path[-1] if path else None
            definition = self.definition(name, requester)
            path.append(name)
            for dep in definition.params:
                visit(dep, path)
            path.pop()
            done.add(name)

        for name in self._defs:
            visit(name, [])

    # -------------------------------------------------------------------------
    # Scenarios
    # -------------------------------------------------------------------------

    def scenario(self, name: str, page: Any) -> "Scenario":
        """Validate the graph and create an unopened scenario bound to ``page``."""
        self.validate()
        return Scenario(self, name, page)


class Scenario:
    """
    Per-scenario fixture scope.

    Use as a context manager, or call ``open()`` and ``close()`` explicitly
    when the runner reports the outcome separately.
    """

    def __init__(self, registry: FixtureRegistry, name: str, page: Any):
        self.registry = registry
        self.name = name
        self.outcome: str | None = None
        self.started_at: float | None = None
        self.closed = False
        self._page = page
        self._instances: dict[str, Any] = {}
        self._teardowns: list[tuple[str, Generator[Any, None, None]]] = []
        self._started_hooks: list[ScenarioHook] = []
        self._resolving: list[str] = []

    def __repr__(self) -> str:
        return f"Scenario({self.name!r}, outcome={self.outcome!r})"

    def __enter__(self) -> "Scenario":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is not None and self.outcome is None:
            self.outcome = FAILED
        self.close()
        return False

    @property
    def page(self) -> Any:
        if self.closed:
            raise ScenarioClosedError(f"scenario {self.name!r} is closed")
        return self._page

    @property
    def failed(self) -> bool:
        return self.outcome == FAILED

    @property
    def built(self) -> dict[str, Any]:
        """Fixtures built so far, by name."""
        return dict(self._instances)

    def open(self) -> "Scenario":
        """Run every hook's ``before``; a failing hook closes the scenario."""
        self.started_at = time.monotonic()
        logger.debug("Opening scenario %s", self.name)
        try:
            for hook in self.registry.hooks:
                hook.before(self)
                self._started_hooks.append(hook)
        except Exception:
            self.outcome = FAILED
            self.close()
            raise
        return self

    def get(self, name: str) -> Any:
        """
        Return the fixture ``name``, building it on first request.

        Raises:
            ScenarioClosedError: The scenario already ended.
            UnknownFixtureError: No factory provides ``name``.
            FixtureCycleError: ``name`` is already being built higher up.
        """
        if self.closed:
            raise ScenarioClosedError(f"scenario {self.name!r} is closed")
        if name == PAGE:
            return self._page
        if name in self._instances:
            return self._instances[name]
        if name in self._resolving:
            start = self._resolving.index(name)
            raise FixtureCycleError(self._resolving[start:] + [name])

        requester = self._resolving[-1] if self._resolving else None
        definition = self.registry.definition(name, requester)

        self._resolving.append(name)
        try:
            kwargs = {param: self.get(param) for param in definition.params}
        finally:
            self._resolving.pop()

        if definition.is_generator:
            generator = definition.factory(**kwargs)
            try:
                value = next(generator)
            except StopIteration:
                raise RuntimeError(f"fixture {name!r} did not yield") from None
            self._teardowns.append((name, generator))
        else:
            value = definition.factory(**kwargs)

        logger.debug("Scenario %s built fixture %s", self.name, name)
        self._instances[name] = value
        return value

    def close(self, outcome: str | None = None) -> None:
        """
        End the scenario and release everything it built.

        Every cleanup step runs even if an earlier one fails; the first
        error is re-raised once all of them have run.

        Args:
            outcome: ``"passed"``, ``"failed"`` or ``"skipped"``. Defaults to
                the outcome already recorded, else ``"passed"``.
        """
        if self.closed:
            return
        if outcome is not None:
            if outcome not in OUTCOMES:
                raise ValueError(f"unknown outcome {outcome!r}")
            self.outcome = outcome
        if self.outcome is None:
            self.outcome = PASSED

        errors: list[Exception] = []

        for hook in reversed(self._started_hooks):
            try:
                hook.after(self)
            except Exception as exc:
                logger.error("Hook %s failed after %s: %s", type(hook).__name__, self.name, exc)
                errors.append(exc)

        for name, generator in reversed(self._teardowns):
            try:
                next(generator)
            except StopIteration:
                pass
            except Exception as exc:
                logger.error("Teardown of fixture %s failed: %s", name, exc)
                errors.append(exc)
            else:
                errors.append(RuntimeError(f"fixture {name!r} yielded more than once"))

        for name, value in self._instances.items():
            release = getattr(value, "release", None)
            if not callable(release):
                continue
            try:
                release()
            except Exception as exc:
                logger.error("Release of fixture %s failed: %s", name, exc)
                errors.append(exc)

        self._instances.clear()
        self._teardowns.clear()
        self._started_hooks.clear()
        self._page = None
        self.closed = True
        logger.debug("Closed scenario %s (%s)", self.name, self.outcome)

        if errors:
            raise errors[0]
