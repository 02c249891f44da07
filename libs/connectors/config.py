# libs/connectors/config.py
from __future__ import annotations

from typing import Dict, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlpacaSettings(BaseSettings):
    """
    Alpaca credentials and endpoints.

    Environment example:
      APCA_API_KEY_ID=PKxxxx
      APCA_API_SECRET_KEY=xxxx
      APCA_DATA_URL=https://data.alpaca.markets
      APCA_TRADING_URL=https://paper-api.alpaca.markets
    """

    API_KEY_ID: Optional[str] = None
    API_SECRET_KEY: Optional[str] = None
    DATA_URL: str = "https://data.alpaca.markets"
    TRADING_URL: str = "https://paper-api.alpaca.markets"
    TIMEOUT_SEC: Optional[float] = None  # None: wait for the upstream indefinitely

    model_config = SettingsConfigDict(
        env_prefix="APCA_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.API_KEY_ID and self.API_SECRET_KEY)

    def auth_headers(self) -> Dict[str, str]:
        """The two static headers attached to every upstream call; unset ones are left out."""
        headers = {
            "APCA-API-KEY-ID": self.API_KEY_ID,
            "APCA-API-SECRET-KEY": self.API_SECRET_KEY,
        }
        return {k: v for k, v in headers.items() if v}
