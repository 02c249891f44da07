# apps/api/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Listen address and log level of the adapter process."""

    HOST: str = "172.17.0.1"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"  # any stdlib name; WARN and FATAL included
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(env_prefix="EA_", env_file=".env", extra="ignore", frozen=True)
