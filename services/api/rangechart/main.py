from __future__ import annotations

import logging
from datetime import UTC, datetime
from time import perf_counter

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .cards import MalformedNotation
from .config import load_settings
from .database import get_supabase_client
from .schemas import (
    DrillMetadataResponse,
    ErrorBody,
    HealthResponse,
    PlayingCardsResponse,
    PointerRequest,
    PointerResponse,
    RangeChartResponse,
    RangeChartUpdateRequest,
    RenderRequest,
    RenderResponse,
    StartingHandsResponse,
    TypedHandRequest,
    TypedHandResponse,
)
from .services import (
    assign_suits,
    describe_typed_hand,
    drill_metadata,
    get_stored_chart,
    handle_pointer,
    list_starting_hands,
    render_chart,
    replace_stored_chart,
    request_id,
)
from .theme import InvalidColor

settings = load_settings()
app = FastAPI(title="range-chart-api", version=settings.app_version)
logger = logging.getLogger("range-chart-api")


def _parse_cors_origins(raw: str) -> list[str]:
    value = raw.strip()
    if value == "*" or not value:
        return ["*"]
    return [part.strip() for part in value.split(",") if part.strip()]


def _error(
    status_code: int,
    code: str,
    message: str,
    request_id_override: str | None = None,
) -> JSONResponse:
    body = ErrorBody(code=code, message=message, requestId=request_id_override or request_id())
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _request_id_from_request(request: Request) -> str:
    rid = getattr(request.state, "request_id", "")
    if isinstance(rid, str) and rid:
        return rid
    return request_id()


@app.middleware("http")
async def request_middleware(request: Request, call_next):  # type: ignore[no-untyped-def]
    rid = request.headers.get("x-request-id", "").strip() or request_id()
    request.state.request_id = rid
    started = perf_counter()

    content_length_raw = request.headers.get("content-length")
    if content_length_raw:
        try:
            content_length = int(content_length_raw)
        except ValueError:
            content_length = 0
        if content_length > settings.max_request_body_bytes:
            return _error(
                413,
                "payload_too_large",
                f"payload exceeds {settings.max_request_body_bytes} bytes",
                request_id_override=rid,
            )

    response = await call_next(request)
    elapsed_ms = round((perf_counter() - started) * 1000, 2)
    response.headers["X-Request-Id"] = rid
    response.headers["X-Content-Type-Options"] = "nosniff"

    logger.info(
        "request completed",
        extra={
            "request_id": rid,
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_ms": elapsed_ms,
        },
    )
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=_parse_cors_origins(settings.cors_origin),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MalformedNotation)
def malformed_notation_handler(request: Request, exc: MalformedNotation) -> JSONResponse:
    return _error(400, "malformed_notation", str(exc), _request_id_from_request(request))


@app.exception_handler(InvalidColor)
def invalid_color_handler(request: Request, exc: InvalidColor) -> JSONResponse:
    return _error(400, "invalid_color", str(exc), _request_id_from_request(request))


@app.exception_handler(httpx.HTTPError)
def range_source_error_handler(request: Request, exc: httpx.HTTPError) -> JSONResponse:
    logger.warning("range source request failed: %s", exc)
    return _error(502, "range_source_error", str(exc), _request_id_from_request(request))


@app.exception_handler(RuntimeError)
def runtime_error_handler(request: Request, exc: RuntimeError) -> JSONResponse:
    message = str(exc)
    rid = _request_id_from_request(request)
    if "Supabase credentials missing" in message:
        return _error(500, "supabase_config_error", message, rid)
    if "Range source missing" in message:
        return _error(500, "range_source_config_error", message, rid)
    return _error(500, "internal_error", message, rid)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        service="range-chart-api",
        timestamp=datetime.now(UTC).isoformat(),
    )


@app.get("/ready")
def ready(request: Request) -> JSONResponse:
    rid = _request_id_from_request(request)
    try:
        supabase = get_supabase_client(settings)
        supabase.table(settings.range_chart_table).select("chart_id").limit(1).execute()
    except Exception as exc:  # noqa: BLE001 - readiness should report all failures
        return _error(503, "not_ready", str(exc), rid)

    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "service": "range-chart-api",
            "version": settings.app_version,
            "requestId": rid,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    )


@app.get("/api/starting-hands", response_model=StartingHandsResponse)
def starting_hands() -> StartingHandsResponse:
    return list_starting_hands()


@app.get("/api/drill-metadata", response_model=DrillMetadataResponse)
def drill_metadata_get() -> DrillMetadataResponse:
    return drill_metadata()


@app.post("/api/hands/typed", response_model=TypedHandResponse)
def hands_typed(payload: TypedHandRequest) -> TypedHandResponse:
    return assign_suits(payload)


@app.get("/api/hands/{typed}/cards", response_model=PlayingCardsResponse)
def hands_cards(typed: str) -> PlayingCardsResponse:
    return describe_typed_hand(typed)


@app.post("/api/range-chart/render", response_model=RenderResponse)
def range_chart_render(payload: RenderRequest) -> RenderResponse:
    supabase = get_supabase_client(settings) if payload.distributions is None and payload.chartId else None
    return render_chart(payload, settings, supabase)


@app.post("/api/range-chart/pointer", response_model=PointerResponse)
def range_chart_pointer(payload: PointerRequest) -> PointerResponse:
    return handle_pointer(payload, settings)


@app.get("/api/range-charts/{chart_id}", response_model=RangeChartResponse)
def range_charts_get(chart_id: str) -> RangeChartResponse:
    supabase = get_supabase_client(settings)
    return get_stored_chart(supabase, settings, chart_id)


@app.put("/api/range-charts/{chart_id}", response_model=RangeChartResponse)
def range_charts_put(chart_id: str, payload: RangeChartUpdateRequest) -> RangeChartResponse:
    supabase = get_supabase_client(settings)
    return replace_stored_chart(supabase, settings, chart_id, payload.distributions)
