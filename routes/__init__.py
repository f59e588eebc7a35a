"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.views import router as views_router
from routes.project_products import router as project_products_router
from routes.public import router as public_router

__all__ = [
    "views_router",
    "project_products_router",
    "public_router",
]
