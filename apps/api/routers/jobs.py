# apps/api/routers/jobs.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from apps.api.deps import get_job_adapter
from apps.api.services.job_adapter import JobAdapterService
from libs.contracts.job_models import JobOutcome

router = APIRouter(tags=["jobs"])


def _respond(outcome: JobOutcome) -> JSONResponse:
    return JSONResponse(status_code=outcome.status_code, content=outcome.body())


@router.post("/equitiesprice")
def equities_price(body: Optional[Dict[str, Any]] = Body(None), svc: JobAdapterService = Depends(get_job_adapter)):
    """Latest ask price of an equity, in dollars"""
    return _respond(svc.equities_price(body or {}))


@router.post("/cryptoprice")
def crypto_price(body: Optional[Dict[str, Any]] = Body(None), svc: JobAdapterService = Depends(get_job_adapter)):
    """Latest ask price of a crypto pair on an exchange, in integer cents"""
    return _respond(svc.crypto_price(body or {}))


@router.post("/cryptoaskingsize")
def crypto_asking_size(body: Optional[Dict[str, Any]] = Body(None), svc: JobAdapterService = Depends(get_job_adapter)):
    """Latest ask size of a crypto pair on an exchange"""
    return _respond(svc.crypto_asking_size(body or {}))


@router.post("/alpacatrade")
def alpaca_trade(body: Optional[Dict[str, Any]] = Body(None), svc: JobAdapterService = Depends(get_job_adapter)):
    """Submit a market/day order and return the order status"""
    return _respond(svc.trade(body or {}))
