# libs/contracts/job_models.py
# JobRequest / JobOutcome: the envelope shared by every adapter endpoint
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, ClassVar, Dict, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_JOB_RUN_ID = 1
ADAPTER_ERROR = "AdapterError"

# (field, message when missing) in check order
Required = Tuple[Tuple[str, str], ...]


class JobValidationError(ValueError):
    """A required input field is missing or falsy."""


def job_run_id(raw: Any) -> Any:
    # never raises: the id must be echoed even when the body itself is bad
    value = raw.get("id") if isinstance(raw, Mapping) else None
    return DEFAULT_JOB_RUN_ID if value is None else value


# ---- inbound ----
class JobRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")
    id: Any = None
    data: Dict[str, Any] = Field(default_factory=dict)


class JobInput(BaseModel):
    """
    Base for per-operation inputs.

    REQUIRED lists (field, message) in check order; from_data strips string
    values, then stops at the first missing or falsy field. Numbers given for
    string fields are taken as their text (symbol 123 -> "123").
    """
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)
    REQUIRED: ClassVar[Required] = ()

    @classmethod
    def from_data(cls, data: Mapping[str, Any]):
        cleaned = {k: v.strip() if isinstance(v, str) else v for k, v in data.items()}
        for field, message in cls.REQUIRED:
            if not cleaned.get(field):
                raise JobValidationError(message)
        return cls.model_validate(cleaned)


class QuoteInput(JobInput):
    REQUIRED: ClassVar[Required] = (("symbol", "Symbol is required"),)
    symbol: str


class CryptoQuoteInput(JobInput):
    REQUIRED: ClassVar[Required] = (
        ("exchange", "Exchange is required"),
        ("symbol", "Symbol is required"),
    )
    exchange: str
    symbol: str


class OrderInput(JobInput):
    REQUIRED: ClassVar[Required] = (
        ("symbol", "Symbol is required"),
        ("qty", "Quantity is required"),
        ("side", "Buy/Sell Side is required"),
    )
    symbol: str
    qty: Union[int, float, str]     # forwarded to the broker as given
    side: str


# ---- outbound ----
class _Envelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class JobSuccess(_Envelope):
    job_run_id: Any


class PriceResult(JobSuccess):
    price: Any  # whatever the upstream sent


class AskingSizeResult(JobSuccess):
    asking_size: Any


class OrderStatusResult(JobSuccess):
    order_status: Any = None


class JobError(_Envelope):
    job_run_id: Any
    status: Literal["errored"] = "errored"
    error: Literal["AdapterError"] = ADAPTER_ERROR
    message: str
    status_code: Literal[500] = 500


class JobOutcome(BaseModel):
    """HTTP status plus either the success or the error envelope."""
    model_config = ConfigDict(frozen=True)
    status_code: int
    result: Union[JobSuccess, JobError]

    @property
    def ok(self) -> bool:
        return isinstance(self.result, JobSuccess)

    @classmethod
    def failed(cls, run_id: Any, message: str) -> "JobOutcome":
        return cls(status_code=500, result=JobError(job_run_id=run_id, message=message))

    def body(self) -> Dict[str, Any]:
        return self.result.model_dump(by_alias=True)
