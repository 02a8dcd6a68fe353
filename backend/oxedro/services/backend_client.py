"""Supabase client construction.

The client is created once by the application's startup hook and handed to
whoever needs it; nothing in the package holds it at module level.
"""

import logging

from supabase import AsyncClient, acreate_client

from oxedro.config import Settings

logger = logging.getLogger(__name__)


class BackendNotConfigured(RuntimeError):
    pass


async def create_backend_client(config: Settings) -> AsyncClient:
    """Build the async Supabase client (auth + PostgREST) from settings."""
    if not config.backend_configured:
        raise BackendNotConfigured("SUPABASE_URL and SUPABASE_ANON_KEY must both be set")

    client = await acreate_client(config.SUPABASE_URL, config.SUPABASE_ANON_KEY)
    logger.info(f"Supabase client ready for {config.SUPABASE_URL}")
    return client
