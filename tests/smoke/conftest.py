"""
Smoke-test fixtures for the playground demo site.

Provides the ``smoke_base_url`` session-scoped fixture: the configured
base URL, once the site answers. The whole smoke suite shares one wait.
"""

from __future__ import annotations

import pytest

from playground.config import get_config
from playground.live_site import wait_for_site


@pytest.fixture(scope="session")
def smoke_base_url() -> str:
    """Return a reachable base URL for smoke tests."""
    settings = get_config()
    base_url = settings.BASE_URL.rstrip("/")
    wait_for_site(base_url, timeout=settings.SCENARIO_TIMEOUT)
    return base_url
