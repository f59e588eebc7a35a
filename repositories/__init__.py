"""
Data access over Supabase tables.

Services receive a repository instead of a raw client.
"""

from repositories.view_repository import ViewRepository, SupabaseViewRepository
from repositories.project_product_repository import SupabaseProjectProductRepository
from repositories.project_repository import SupabaseProjectRepository

__all__ = [
    "ViewRepository",
    "SupabaseViewRepository",
    "SupabaseProjectProductRepository",
    "SupabaseProjectRepository",
]
