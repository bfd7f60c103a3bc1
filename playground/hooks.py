"""Scenario hooks applied to every scenario: step logging and failure screenshots."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError

from playground.registry import Scenario, ScenarioHook

logger = logging.getLogger(__name__)


class StepLogHook(ScenarioHook):
    """Log the start, outcome, and duration of each scenario."""

    def before(self, scenario: Scenario) -> None:
        logger.info("Scenario started: %s", scenario.name)

    def after(self, scenario: Scenario) -> None:
        elapsed = time.monotonic() - (scenario.started_at or time.monotonic())
        logger.info(
            "Scenario finished: %s [%s] in %.2fs", scenario.name, scenario.outcome, elapsed
        )


class FailureScreenshotHook(ScenarioHook):
    """
    Capture a screenshot of the scenario page when the scenario failed.

    Best effort: a page that can no longer be captured is logged, not raised,
    so the original failure stays the one that gets reported.
    """

    def __init__(self, directory: str | Path = "test-results/screenshots"):
        self.directory = Path(directory)

    def path_for(self, scenario: Scenario) -> Path:
        safe_name = re.sub(r"[^\w.-]+", "_", scenario.name).strip("_")
        return self.directory / f"{safe_name}.png"

    def after(self, scenario: Scenario) -> None:
        if not scenario.failed:
            return
        path = self.path_for(scenario)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            scenario.page.screenshot(path=str(path))
        except (PlaywrightError, OSError) as exc:
            logger.warning("Failed to capture screenshot for %s: %s", scenario.name, exc)
            return
        logger.info("Screenshot saved: %s", path)
