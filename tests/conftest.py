"""
Shared pytest fixtures for the playground test suite.

Key Concepts Demonstrated:
- Test data factories
- Reproducible random data through a seeded generator
"""

import pytest
from faker import Faker


@pytest.fixture
def fake() -> Faker:
    """
    Faker instance seeded per test.

    Generated values differ between tests but are stable across runs,
    so a failing scenario can be replayed with the same data.
    """
    generator = Faker()
    generator.seed_instance(2025)
    return generator
