import pytest
from fastapi.testclient import TestClient

from greetings.config import Settings
from greetings.server import create_app


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as client:
        yield client
