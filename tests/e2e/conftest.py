"""Fixtures for end-to-end tests through the HTTP app."""

import pytest
from fastapi.testclient import TestClient

from muse.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def container():
    """Fully mocked container, shared by every request of one test."""
    return build_test_container(with_fastapi=True)


@pytest.fixture
def client(container):
    """Test client; entering it runs the app lifespan."""
    with TestClient(create_app(container)) as test_client:
        yield test_client
