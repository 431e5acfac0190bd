from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client

from .config import Settings


@lru_cache(maxsize=4)
def get_supabase_client(settings: Settings) -> Client:
    """Client for the stored range chart table, one per distinct settings value."""
    if not settings.supabase_url or not settings.supabase_key:
        raise RuntimeError(
            "Supabase credentials missing for range chart storage "
            f"(table {settings.range_chart_table!r}). "
            "Please set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY (or SUPABASE_KEY).",
        )
    return create_client(settings.supabase_url, settings.supabase_key)
