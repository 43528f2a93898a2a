"""HTTP surface - FastAPI routes over the API views."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import container
from app.errors import (
    AuthenticationError,
    ConfigurationError,
    NoValidDataError,
    RateLimitedError,
    SheetNotFoundError,
    UpstreamError,
)
from app.services.metrics.filters import DEFAULT_RANGE
from web.api import metrics
from web.api.errors import ValidationError
from web.api.metrics.schemas import AllMetricsResponse, SheetsResponse, UrlMetricsResponse

RETRY_AFTER_SECONDS = 60

ERROR_STATUS = {
    SheetNotFoundError: 404,
    NoValidDataError: 422,
    RateLimitedError: 429,
    ValidationError: 400,
    UpstreamError: 502,
    AuthenticationError: 500,
    ConfigurationError: 500,
}


async def _error_response(request: Request, exc: Exception) -> JSONResponse:
    status = next(ERROR_STATUS[cls] for cls in type(exc).__mro__ if cls in ERROR_STATUS)
    if status >= 500:
        logger.error("{} {} failed: {}", request.method, request.url.path, exc)
    else:
        logger.info("{} {} -> {}: {}", request.method, request.url.path, status, exc)

    headers = {"Retry-After": str(RETRY_AFTER_SECONDS)} if status == 429 else None
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "message": getattr(exc, "message", str(exc))},
        headers=headers,
    )


@asynccontextmanager
async def lifespan(_: FastAPI):
    container.init()
    await container.start()
    try:
        yield
    finally:
        await container.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Lighthouse Metrics API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    for exc_class in ERROR_STATUS:
        app.add_exception_handler(exc_class, _error_response)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/sheets", response_model=SheetsResponse)
    async def get_all_sheets():
        return await metrics.get_all_sheets()

    @app.get(
        "/api/sheets/{sheet_title}/metrics",
        response_model=UrlMetricsResponse,
        response_model_exclude_none=True,
    )
    async def get_metrics_for_sheet(
        sheet_title: str,
        date_range: str = Query(DEFAULT_RANGE, alias="range"),
        selected: str | None = Query(None, alias="metrics"),
    ):
        return await metrics.get_metrics_for_sheet(sheet_title, date_range, selected)

    @app.get("/api/metrics", response_model=AllMetricsResponse, response_model_exclude_none=True)
    async def get_all_metrics(
        date_range: str = Query(DEFAULT_RANGE, alias="range"),
        selected: str | None = Query(None, alias="metrics"),
    ):
        return await metrics.get_all_metrics(date_range, selected)

    return app


app = create_app()
