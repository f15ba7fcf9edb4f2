import pytest
from fastapi.testclient import TestClient

from userpic import app
from userpic.plugins import AvatarStore


@pytest.fixture(autouse=True)
def clear_store():
    """Start every test without mounted avatars."""
    AvatarStore().clear()
    yield
    AvatarStore().clear()


@pytest.fixture(scope="function")
def test_client():
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client
