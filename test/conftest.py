# test/conftest.py
import pytest
from fastapi.testclient import TestClient

from apps.api.deps import get_job_adapter
from apps.api.main import app
from apps.api.services.job_adapter import JobAdapterService
from libs.connectors.alpaca_client import AlpacaClient
from libs.connectors.config import AlpacaSettings
from fakes import FakeSession


@pytest.fixture
def settings() -> AlpacaSettings:
    return AlpacaSettings(
        API_KEY_ID="key-id",
        API_SECRET_KEY="secret",
        DATA_URL="https://data.test",
        TRADING_URL="https://trading.test",
        _env_file=None,
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def service(settings, session) -> JobAdapterService:
    return JobAdapterService(client=AlpacaClient(settings, session=session))


@pytest.fixture
def client(service):
    app.dependency_overrides[get_job_adapter] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
