"""
Project schemas for serialization.

Projects are managed elsewhere; this service reads them for the public
share-by-key flow.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema, TimestampMixin


class ProjectResponse(BaseSchema, TimestampMixin):
    """Project as stored in the projects table."""

    project_id: str = Field(..., description="Project UUID")
    admin_id: str = Field(..., description="Administrator that owns the project")
    name: str = Field(..., description="Project name")
    num_products: int = Field(0, ge=0, description="Number of products")
    final_message: Optional[str] = Field(
        None,
        description="Message shown after the last view"
    )
    public_key: Optional[str] = Field(None, description="Key of the public share link")
