"""
Run configuration module.

This module defines configuration classes for the environments the suite
runs in (a developer machine and CI). Values are loaded from environment
variables, or from a ``.env`` file in the working directory, with
sensible defaults.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

BROWSER_ENGINES = ("chromium", "firefox", "webkit")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_browsers(name: str) -> tuple[str, ...]:
    value = os.environ.get(name)
    if not value:
        return BROWSER_ENGINES
    browsers = tuple(item.strip() for item in value.split(",") if item.strip())
    unknown = set(browsers) - set(BROWSER_ENGINES)
    if unknown:
        raise ValueError(f"{name}: unknown browser engine(s) {sorted(unknown)}")
    return browsers


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("PLAYGROUND_BASE_URL", "https://playground.bondaracademy.com")

    # Whole-scenario limit in seconds, and per-action wait in milliseconds
    SCENARIO_TIMEOUT: int = int(os.environ.get("SCENARIO_TIMEOUT", "60"))
    ACTION_TIMEOUT_MS: int = int(os.environ.get("ACTION_TIMEOUT_MS", "10000"))

    BROWSERS: tuple[str, ...] = _env_browsers("PLAYGROUND_BROWSERS")
    HEADLESS: bool = _env_bool("PLAYGROUND_HEADLESS", True)

    ARTIFACTS_DIR: str = os.environ.get("PLAYGROUND_ARTIFACTS_DIR", "test-results")

    RETRIES: int = 1
    WORKERS: int = 4


class LocalConfig(Config):
    """Developer machine: one retry, a pool of four workers."""

    RETRIES: int = int(os.environ.get("PLAYGROUND_RETRIES", "1"))
    WORKERS: int = int(os.environ.get("PLAYGROUND_WORKERS", "4"))


class CIConfig(Config):
    """CI runner: more retries, one worker to stay within runner resources."""

    RETRIES: int = int(os.environ.get("PLAYGROUND_RETRIES", "3"))
    WORKERS: int = int(os.environ.get("PLAYGROUND_WORKERS", "1"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci). If None, PLAYGROUND_ENV is used,
             falling back to ``ci`` when the CI environment variable is set.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("PLAYGROUND_ENV") or ("ci" if os.environ.get("CI") else "local")
    return config.get(env, config["default"])


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
