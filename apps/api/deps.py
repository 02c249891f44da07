# apps/api/deps.py
from __future__ import annotations
from functools import lru_cache
from time import perf_counter

from apps.api.config import ServerSettings
from apps.api.services.job_adapter import JobAdapterService
from libs.connectors.alpaca_client import AlpacaClient
from libs.connectors.config import AlpacaSettings
from libs.observability.logging import get_logger


@lru_cache
def get_server_settings() -> ServerSettings:
    return ServerSettings()


@lru_cache
def get_alpaca_settings() -> AlpacaSettings:
    settings = AlpacaSettings()
    if not settings.has_credentials:
        get_logger(__name__).warning(
            "alpaca.credentials_missing",
            key_id_set=bool(settings.API_KEY_ID),
            secret_set=bool(settings.API_SECRET_KEY),
        )
    return settings


@lru_cache
def get_job_adapter() -> JobAdapterService:
    """
    Wire up the adapter service (DI):
      - client: AlpacaClient over a shared requests.Session, credentials from env
      - logger: structlog
      - clock : perf_counter
    Built once per process; tests replace it via app.dependency_overrides.
    """
    client = AlpacaClient(get_alpaca_settings())
    return JobAdapterService(client=client, logger=get_logger("apps.api.job_adapter"), clock=perf_counter)
