import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from tripbudget.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def goa_trip() -> dict:
    return {
        "destination": "Goa",
        "travelStyle": "Budget",
        "travelMode": "flight",
        "people": 2,
        "days": 3,
    }
