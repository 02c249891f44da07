# apps/api/main.py
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from apps.api.deps import get_server_settings
from apps.api.routers import jobs
from libs.contracts.job_models import JobOutcome, DEFAULT_JOB_RUN_ID
from libs.observability.logging import get_logger, setup_logging, uvicorn_level

_settings = get_server_settings()
setup_logging(_settings.LOG_LEVEL, json=_settings.LOG_JSON)

app = FastAPI(title="Alpaca job adapter")


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    # body is not a JSON object: still answer with the job envelope
    get_logger(__name__).warning("job.bad_body", path=request.url.path, errors=len(exc.errors()))
    outcome = JobOutcome.failed(DEFAULT_JOB_RUN_ID, "Request body must be a JSON object")
    return JSONResponse(status_code=outcome.status_code, content=outcome.body())


@app.get("/", response_class=HTMLResponse)
def root():
    return """
    <html><body>
      <h1>Alpaca Job Adapter</h1>
      <p>See <a href="/docs">/docs</a> for Swagger UI.</p>
    </body></html>
    """


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


app.include_router(jobs.router)


def run() -> None:
    """Console entry point: serve on EA_HOST:EA_PORT."""
    settings = get_server_settings()
    get_logger(__name__).info("server.start", host=settings.HOST, port=settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=uvicorn_level(settings.LOG_LEVEL))


if __name__ == "__main__":
    run()
