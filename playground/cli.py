"""
Command-line entry point for the E2E suite.

Builds a pytest command line from the run configuration and hands it to
pytest. The browser lifecycle, retries, worker pool, scenario timeout,
and failure artifacts are all handled by pytest plugins; this module only
chooses their settings.

Usage:
    playground-e2e --env ci --browser chromium -- -k block_form

Exit codes are pytest's own.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import pytest

from playground.config import BROWSER_ENGINES, Config, configure_logging, get_config

logger = logging.getLogger(__name__)

DEFAULT_TEST_PATH = "tests/e2e"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for an E2E run."""
    parser = argparse.ArgumentParser(description="Run the playground E2E suite.")
    parser.add_argument("--env", choices=["local", "ci"], default=None, help="Configuration to use")
    parser.add_argument(
        "--browser",
        action="append",
        choices=BROWSER_ENGINES,
        dest="browsers",
        help="Browser engine to target (repeatable, default: all configured)",
    )
    parser.add_argument("--workers", type=int, help="Parallel worker processes")
    parser.add_argument("--retries", type=int, help="Reruns of a failed scenario")
    parser.add_argument("--timeout", type=int, help="Per-scenario timeout in seconds")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--tests", default=DEFAULT_TEST_PATH, help="Test path to collect")
    parser.add_argument("pytest_args", nargs="*", help="Extra arguments passed to pytest")
    return parser.parse_args(argv)


def build_pytest_args(args: argparse.Namespace, settings: type[Config]) -> list[str]:
    """
    Translate parsed arguments and configuration into pytest arguments.

    Command-line values win over configuration values.
    """
    browsers = args.browsers or list(settings.BROWSERS)
    workers = settings.WORKERS if args.workers is None else args.workers
    retries = settings.RETRIES if args.retries is None else args.retries
    timeout = settings.SCENARIO_TIMEOUT if args.timeout is None else args.timeout
    artifacts = Path(settings.ARTIFACTS_DIR)

    pytest_args = [args.tests, "-m", "e2e"]
    for browser in browsers:
        pytest_args += ["--browser", browser]
    if workers > 1:
        pytest_args += ["-n", str(workers)]
    if retries > 0:
        pytest_args += ["--reruns", str(retries)]
    pytest_args += [
        "--timeout", str(timeout),
        "--screenshot", "only-on-failure",
        "--video", "retain-on-failure",
        "--tracing", "retain-on-failure",
        "--output", str(artifacts / "artifacts"),
        "--junitxml", str(artifacts / "junit.xml"),
    ]
    if args.headed or not settings.HEADLESS:
        pytest_args.append("--headed")
    return pytest_args + list(args.pytest_args)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.env:
        # The test process picks its configuration from the environment too.
        os.environ["PLAYGROUND_ENV"] = args.env
    settings = get_config(args.env)
    configure_logging()
    pytest_args = build_pytest_args(args, settings)
    logger.info("Running pytest with %s (config: %s)", " ".join(pytest_args), settings.__name__)
    return int(pytest.main(pytest_args))


if __name__ == "__main__":
    raise SystemExit(main())
