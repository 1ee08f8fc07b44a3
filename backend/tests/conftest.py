import pytest
from fastapi.testclient import TestClient

from main import create_app
from store import AnalyticsStore


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "analytics-data.json"


@pytest.fixture()
def store(data_file) -> AnalyticsStore:
    s = AnalyticsStore(data_file)
    s.load()
    return s


@pytest.fixture()
def client(data_file) -> TestClient:
    return TestClient(create_app(data_file))
