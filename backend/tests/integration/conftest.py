"""
Integration suite fixtures.

The server is started once per session against the test store; every test
gets freshly seeded data and the database is dropped afterwards. The whole
suite is skipped when MongoDB is not reachable at TEST_MONGODB_URL.
"""

import httpx
import pytest
import pytest_asyncio

from config import get_settings
from tests.factories import FakerPostGenerator
from tests.lifecycle import BlogApiLifecycle


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def lifecycle():
    """Start the server once for the whole suite."""
    lifecycle = BlogApiLifecycle(get_settings().for_testing(), generator=FakerPostGenerator())

    if not await lifecycle.store_reachable():
        pytest.skip(f"MongoDB not reachable at {lifecycle.settings.mongodb_url}")

    await lifecycle.start_server()
    yield lifecycle
    await lifecycle.stop_server()


@pytest_asyncio.fixture(loop_scope="session")
async def seeded(lifecycle):
    """Seed before the test, drop the database after it."""
    await lifecycle.seed()
    yield lifecycle
    await lifecycle.tear_down()


@pytest.fixture
def http(seeded) -> httpx.AsyncClient:
    return seeded.http


@pytest.fixture
def store(seeded):
    """Direct store access that bypasses the API."""
    return seeded.repository
