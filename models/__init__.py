"""
Pydantic models for validation and serialization.
"""

from models.base import (
    BaseSchema,
    TimestampMixin,
)
from models.view import (
    ViewCreate,
    ViewUpdate,
    ViewResponse,
    ViewProductsUpdate,
    ViewCountResponse,
)
from models.product import ProductResponse
from models.project import ProjectResponse
from models.project_product import ProjectProduct

__all__ = [
    # Base
    "BaseSchema",
    "TimestampMixin",

    # View
    "ViewCreate",
    "ViewUpdate",
    "ViewResponse",
    "ViewProductsUpdate",
    "ViewCountResponse",

    # Product
    "ProductResponse",

    # Project
    "ProjectResponse",

    # Associations
    "ProjectProduct",
]
