"""
Project <-> Product association.

One row of the project_products join table. Frozen so two links with the
same pair compare and hash equal.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProjectProduct(BaseModel):
    """Link between a project and a product, identified by the id pair."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    project_id: str = Field(..., description="Project UUID")
    product_id: str = Field(..., description="Product UUID")
