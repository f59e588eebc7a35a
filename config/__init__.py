"""
Configuration module.

Exports:
    get_settings: Cached application settings
    create_supabase_client: Single client factory taking a preset
    create_browser_client / create_public_client: Named presets
    get_supabase_client: Cached session client
    check_connection: Health check function
"""

from config.settings import get_settings, Settings
from config.database import (
    ClientPreset,
    SESSION_PRESET,
    PUBLIC_PRESET,
    create_supabase_client,
    create_browser_client,
    create_public_client,
    get_supabase_client,
    check_connection,
    reset_connection,
)

__all__ = [
    # Settings
    "get_settings",
    "Settings",

    # Database
    "ClientPreset",
    "SESSION_PRESET",
    "PUBLIC_PRESET",
    "create_supabase_client",
    "create_browser_client",
    "create_public_client",
    "get_supabase_client",
    "check_connection",
    "reset_connection",
]
