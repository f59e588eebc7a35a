"""
Supabase client construction.

One factory builds every client; the presets below decide whether the
client keeps and refreshes an auth session. The public preset is used for
anonymous read access to shared projects and must never hold credentials.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import structlog

from supabase import create_client, Client, ClientOptions

from config.settings import Settings, get_settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ClientPreset:
    """Session behaviour of a Supabase client."""
    name: str
    persist_session: bool
    auto_refresh_token: bool


SESSION_PRESET = ClientPreset(
    name="session",
    persist_session=True,
    auto_refresh_token=True,
)

PUBLIC_PRESET = ClientPreset(
    name="public",
    persist_session=False,
    auto_refresh_token=False,
)


def create_supabase_client(
    preset: ClientPreset,
    settings: Optional[Settings] = None
) -> Client:
    """
    Build a Supabase client for the given preset.

    Args:
        preset: Session behaviour (SESSION_PRESET or PUBLIC_PRESET)
        settings: Settings to read URL and key from (defaults to env)

    Returns:
        Client: Supabase client

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_PUBLISHABLE_KEY is missing
    """
    settings = settings or get_settings()

    logger.info(
        "creating_supabase_client",
        preset=preset.name,
        url=settings.supabase_url[:30] + "..."  # Log partial URL only
    )

    options = ClientOptions(
        persist_session=preset.persist_session,
        auto_refresh_token=preset.auto_refresh_token,
    )

    return create_client(
        settings.supabase_url,
        settings.supabase_publishable_key,
        options=options
    )


def create_browser_client() -> Client:
    """Client for interactive, authenticated contexts. Keeps its session."""
    return create_supabase_client(SESSION_PRESET)


def create_public_client() -> Client:
    """
    Anonymous client for public access to shared projects.

    Session persistence and token refresh are always disabled.
    """
    return create_supabase_client(PUBLIC_PRESET)


@lru_cache()
def get_supabase_client() -> Client:
    """
    Get cached session client.

    Call reset_connection() to reconnect.
    """
    return create_browser_client()


# ===================
# HELPER FUNCTIONS
# ===================

def check_connection() -> dict:
    """
    Check database connection health.

    Returns:
        dict: Connection status with details
    """
    try:
        client = get_supabase_client()
        views = client.table("views").select("view_id", count="exact").execute()

        return {
            "status": "healthy",
            "views_count": views.count
        }

    except Exception as e:
        logger.warning(
            "health_check_failed",
            error=str(e),
            error_type=type(e).__name__
        )
        return {
            "status": "unhealthy",
            "error": str(e)
        }


def reset_connection():
    """
    Reset the cached database connection.

    Call this if connection becomes stale or after config changes.
    """
    get_supabase_client.cache_clear()
    logger.info("database_connection_reset")
