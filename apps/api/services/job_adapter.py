# apps/api/services/job_adapter.py
from __future__ import annotations

import math
from time import perf_counter
from typing import Any, Callable

import structlog

from libs.connectors.alpaca_client import AlpacaClient
from libs.contracts.job_models import (
    AskingSizeResult,
    CryptoQuoteInput,
    JobOutcome,
    JobRequest,
    JobSuccess,
    OrderInput,
    OrderStatusResult,
    PriceResult,
    QuoteInput,
    job_run_id,
)

# (run_id, data) -> (upstream status, success envelope)
Step = Callable[[Any, dict], tuple[int, JobSuccess]]


class JobAdapterService:
    """
    One method per endpoint. Each one:
      - reads jobRunId (default 1)
      - validates its input record (fail fast)
      - makes exactly one Alpaca call
      - extracts the result fields from the JSON payload
    and returns a JobOutcome. Any exception becomes (500, AdapterError);
    nothing is raised to the router.
    """

    def __init__(self, client: AlpacaClient, logger=None, clock=perf_counter):
        self.client = client
        self.log = logger or structlog.get_logger()
        self.clock = clock

    def equities_price(self, raw: Any) -> JobOutcome:
        def step(run_id, data):
            inp = QuoteInput.from_data(data)
            resp = self.client.latest_stock_quote(inp.symbol)
            # dollars, not cents; crypto_price scales, this one never did
            price = resp.payload["quote"]["ap"]
            return resp.status_code, PriceResult(job_run_id=run_id, price=price)

        return self._execute("equities_price", raw, step)

    def crypto_price(self, raw: Any) -> JobOutcome:
        def step(run_id, data):
            inp = CryptoQuoteInput.from_data(data)
            resp = self.client.latest_crypto_quote(inp.symbol, inp.exchange)
            # integer cents for integer-only consumers
            price = math.floor(resp.payload["quote"]["ap"] * 100)
            return resp.status_code, PriceResult(job_run_id=run_id, price=price)

        return self._execute("crypto_price", raw, step)

    def crypto_asking_size(self, raw: Any) -> JobOutcome:
        def step(run_id, data):
            inp = CryptoQuoteInput.from_data(data)
            resp = self.client.latest_crypto_quote(inp.symbol, inp.exchange)
            size = resp.payload["quote"]["as"]
            return resp.status_code, AskingSizeResult(job_run_id=run_id, asking_size=size)

        return self._execute("crypto_asking_size", raw, step)

    def trade(self, raw: Any) -> JobOutcome:
        def step(run_id, data):
            inp = OrderInput.from_data(data)
            resp = self.client.submit_order(inp.symbol, inp.qty, inp.side)
            return resp.status_code, OrderStatusResult(job_run_id=run_id, order_status=resp.payload.get("status"))

        return self._execute("trade", raw, step)

    # ---------- shared envelope ----------

    def _execute(self, operation: str, raw: Any, step: Step) -> JobOutcome:
        run_id = job_run_id(raw)
        t0 = self.clock()
        try:
            req = JobRequest.model_validate(raw)
            status, result = step(run_id, req.data)
        except Exception as exc:
            self.log.warning(
                "job.failed",
                operation=operation,
                job_run_id=run_id,
                error_type=type(exc).__name__,
                message=str(exc),
                duration_ms=int((self.clock() - t0) * 1000),
            )
            return JobOutcome.failed(run_id, str(exc))

        self.log.info(
            "job.done",
            operation=operation,
            job_run_id=run_id,
            status=status,
            duration_ms=int((self.clock() - t0) * 1000),
        )
        return JobOutcome(status_code=status, result=result)
