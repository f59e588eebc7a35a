"""
Product schemas for serialization.

Products are created and edited elsewhere; this service only reads them
through project and view links.
"""

from pydantic import Field, field_validator
from typing import Any, Optional, Union

from models.base import BaseSchema, TimestampMixin


class ProductResponse(BaseSchema, TimestampMixin):
    """
    Product response with all fields.

    Used for GET responses.
    """

    product_id: str = Field(..., description="Product UUID")
    admin_id: str = Field(..., description="Administrator that owns the product")
    name: str = Field(..., description="Product name")
    description: Optional[str] = None
    cover_image: Optional[str] = Field(None, description="Cover image URL")
    constants: Optional[Union[dict[str, Any], str]] = Field(
        None,
        description="Viewer constants (JSON object or serialized string)"
    )
    path: Optional[str] = Field(None, description="Product viewer URL")
    weight: float = Field(0, description="Sort weight inside a project")

    @field_validator("weight", mode="before")
    @classmethod
    def weight_default(cls, v: Any) -> float:
        """Null, empty or unparseable weight means 0."""
        if v is None or v == "":
            return 0.0
        try:
            return float(v)
        except (TypeError, ValueError):
            return 0.0
