"""Reachability helpers for the live site, shared by the smoke and E2E suites."""

from __future__ import annotations

import logging
import time

import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when ``url`` answers with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Site %s unreachable: %s", url, exc)
        return False
    return response.status_code < 400


def wait_for_site(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll ``url`` until it answers or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            logger.info("Site %s is reachable", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")
