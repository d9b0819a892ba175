import pytest

from fastapi.testclient import TestClient

from greeting_endpoint.main import create_app


@pytest.fixture
def test_client():
    with TestClient(create_app()) as client:
        yield client
