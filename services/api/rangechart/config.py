from __future__ import annotations

import os
from dataclasses import dataclass

from .geometry import Origin


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    cors_origin: str
    app_version: str
    max_request_body_bytes: int
    supabase_url: str
    supabase_key: str
    range_chart_table: str
    range_source_url: str
    range_source_timeout_sec: float
    indicate_invalid: bool
    center_horizontally: bool
    center_vertically: bool
    origin: Origin


def _first_non_empty(*values: str) -> str:
    for value in values:
        stripped = value.strip()
        if stripped:
            return stripped
    return ""


def _as_bool(value: str, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _normalize_origin(raw: str) -> Origin:
    origin = raw.strip().lower().replace("_", "-")
    if origin in {"bottom-left", "bottom", "macos"}:
        return Origin.BOTTOM_LEFT
    return Origin.TOP_LEFT


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3002")),
        cors_origin=os.getenv("CORS_ORIGIN", "*"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        max_request_body_bytes=max(1024, int(os.getenv("MAX_REQUEST_BODY_BYTES", str(512 * 1024)))),
        supabase_url=_first_non_empty(
            os.getenv("SUPABASE_URL", ""),
            os.getenv("NEXT_PUBLIC_SUPABASE_URL", ""),
        ),
        supabase_key=_first_non_empty(
            os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
            os.getenv("SUPABASE_KEY", ""),
        ),
        range_chart_table=_first_non_empty(os.getenv("RANGE_CHART_TABLE", ""), "rc_range_distributions"),
        range_source_url=os.getenv("RANGE_SOURCE_URL", "").strip().rstrip("/"),
        range_source_timeout_sec=max(0.5, float(os.getenv("RANGE_SOURCE_TIMEOUT_SEC", "10"))),
        indicate_invalid=_as_bool(os.getenv("RANGE_CHART_INDICATE_INVALID", "false"), default=False),
        center_horizontally=_as_bool(os.getenv("RANGE_CHART_CENTER_HORIZONTALLY", "true"), default=True),
        center_vertically=_as_bool(os.getenv("RANGE_CHART_CENTER_VERTICALLY", "true"), default=True),
        origin=_normalize_origin(os.getenv("RANGE_CHART_ORIGIN", "top-left")),
    )
