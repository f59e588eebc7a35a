"""
Business logic services.

Each service handles one domain area.
"""

from services.view_service import (
    ViewUseCase,
    default_view_name,
    get_view_use_case,
    get_public_view_use_case,
)
from services.project_product_service import (
    ProjectProductService,
    get_project_product_service,
)
from services.project_service import (
    ProjectService,
    get_public_project_service,
)

__all__ = [
    "ViewUseCase",
    "default_view_name",
    "get_view_use_case",
    "get_public_view_use_case",
    "ProjectProductService",
    "get_project_product_service",
    "ProjectService",
    "get_public_project_service",
]
