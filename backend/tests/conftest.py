"""
Pytest configuration shared by unit and integration tests.
"""

import pytest

from tests.factories import FakerPostGenerator, SequentialPostGenerator


@pytest.fixture
def faker_posts() -> FakerPostGenerator:
    """Faker-backed generator with a fixed seed."""
    return FakerPostGenerator(seed=1234)


@pytest.fixture
def sequential_posts() -> SequentialPostGenerator:
    return SequentialPostGenerator()
