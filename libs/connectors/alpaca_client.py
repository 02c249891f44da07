# libs/connectors/alpaca_client.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

import requests

from .config import AlpacaSettings

ORDER_TYPE = "market"
TIME_IN_FORCE = "day"


class UpstreamParseError(ValueError):
    """Upstream answered with a body that is not JSON."""


@dataclass(frozen=True, slots=True)
class UpstreamResponse:
    status_code: int
    payload: Any


class AlpacaClient:
    """
    Minimal Alpaca REST client: latest quotes (stocks/crypto) and market orders.

    - One call per method, no retry.
    - The HTTP status is returned as-is; only transport failures and
      non-JSON bodies raise.
    """

    def __init__(self, settings: AlpacaSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update(settings.auth_headers())

    def latest_stock_quote(self, symbol: str) -> UpstreamResponse:
        url = f"{self.settings.DATA_URL}/v2/stocks/{symbol}/quotes/latest"
        return self._request("GET", url)

    def latest_crypto_quote(self, symbol: str, exchange: str) -> UpstreamResponse:
        url = f"{self.settings.DATA_URL}/v1beta1/crypto/{symbol}/quotes/latest"
        return self._request("GET", url, params={"exchange": exchange})

    def submit_order(self, symbol: str, qty: Union[int, float, str], side: str) -> UpstreamResponse:
        url = f"{self.settings.TRADING_URL}/v2/orders"
        body = {
            "symbol": symbol,
            "qty": qty,
            "side": side,
            "type": ORDER_TYPE,
            "time_in_force": TIME_IN_FORCE,
        }
        return self._request("POST", url, json=body)

    def _request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        json: Optional[Mapping[str, Any]] = None,
    ) -> UpstreamResponse:
        r = self.session.request(method, url, params=params, json=json, timeout=self.settings.TIMEOUT_SEC)
        try:
            payload = r.json()
        except ValueError as exc:
            # keep a slice of the body, handy when the upstream returns HTML
            raise UpstreamParseError(
                f"Invalid JSON from {url}: status={r.status_code}, body={r.text[:200]}"
            ) from exc
        return UpstreamResponse(status_code=r.status_code, payload=payload)
