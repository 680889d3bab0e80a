"""
Snake & Ladder - Supabase Client

Cached factory for the Supabase client shared by all managers.
"""

from functools import lru_cache

from supabase import Client, create_client

from snakeladder.config.settings import get_settings


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Create the client from SUPABASE_URL / SUPABASE_ANON_KEY once per process."""
    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_anon_key)
