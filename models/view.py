"""
View schemas for validation and serialization.

A view is an ordered page of a project; idx is unique per project.
"""

from pydantic import Field
from typing import Optional

from models.base import BaseSchema, TimestampMixin


class ViewCreate(BaseSchema):
    """
    Create a new view.

    Required: project_id, idx
    Optional: name (defaults to "Vista N")
    """

    project_id: str = Field(..., description="Owning project UUID")
    idx: str = Field(
        ...,
        max_length=20,
        description="Position of the view inside the project",
        examples=["0", "1"]
    )
    name: Optional[str] = Field(
        None,
        max_length=100,
        description="Display name"
    )


class ViewUpdate(BaseSchema):
    """
    Update existing view.

    All fields optional - only provided fields are updated.
    """

    idx: Optional[str] = Field(None, min_length=1, max_length=20)
    name: Optional[str] = Field(None, min_length=1, max_length=100)


class ViewResponse(BaseSchema, TimestampMixin):
    """View as stored in the views table."""

    view_id: str = Field(..., description="View UUID")
    project_id: str = Field(..., description="Owning project UUID")
    idx: str = Field(..., description="Position inside the project")
    name: str = Field(..., description="Display name")


class ViewProductsUpdate(BaseSchema):
    """Product ids to assign to or remove from a view."""

    product_ids: list[str] = Field(default_factory=list)


class ViewCountResponse(BaseSchema):
    project_id: str
    count: int
