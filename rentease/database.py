"""
Hosted backend client setup.
Creates async Supabase clients (auth + PostgREST record store) and probes connectivity.
"""

from typing import Any
import logging

import httpx
from supabase import AsyncClient, PostgrestAPIError, acreate_client

from rentease.config import settings
from rentease.utils.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)


async def create_store_client() -> AsyncClient:
    """
    Create a new backend client.

    Every signed-in browser session gets its own client so that its auth state
    (and therefore the row-level policies applied to its queries) stays isolated.

    Raises:
        ServiceUnavailableError: If the backend is not configured
    """
    if not settings.backend_configured:
        raise ServiceUnavailableError(
            "Backend is not configured. Please set SUPABASE_URL and SUPABASE_ANON_KEY."
        )

    client = await acreate_client(settings.supabase_url, settings.supabase_anon_key)
    logger.debug("Created backend client")
    return client


async def check_backend_connection(client: Any) -> bool:
    """
    Check that the record store answers a trivial query.

    Returns:
        True if the backend is reachable, False otherwise
    """
    try:
        await client.table("properties").select("id").limit(1).execute()
        logger.info("Backend connection successful")
        return True
    except (PostgrestAPIError, httpx.HTTPError) as e:
        logger.error(f"Backend connection failed: {e}")
        return False
