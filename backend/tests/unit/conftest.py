"""
Fixtures for store-free tests.

The app is built without entering its lifespan, so no MongoDB connection is
made; the repository dependency is replaced with an in-memory one.
"""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from database.dependencies import get_blog_post_repository
from main import create_app
from tests.fakes import BrokenBlogPostRepository, InMemoryBlogPostRepository


@pytest.fixture
def unit_settings() -> Settings:
    return Settings(environment="test", allowed_origins="http://localhost:3000")


@pytest.fixture
def repository() -> InMemoryBlogPostRepository:
    return InMemoryBlogPostRepository()


@pytest.fixture
def client(unit_settings, repository) -> TestClient:
    """
    Test client for an app backed by the in-memory repository.

    Used without a ``with`` block so the lifespan (and store connection)
    never runs.
    """
    app = create_app(unit_settings)
    app.dependency_overrides[get_blog_post_repository] = lambda: repository
    return TestClient(app)


@pytest.fixture
def broken_client(unit_settings) -> TestClient:
    """Test client whose store fails every operation."""
    app = create_app(unit_settings)
    app.dependency_overrides[get_blog_post_repository] = BrokenBlogPostRepository
    return TestClient(app)
