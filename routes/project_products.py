"""
Project <-> Product link routes.
"""

from fastapi import APIRouter, Response

from models.project_product import ProjectProduct
from models.product import ProductResponse
from services.project_product_service import get_project_product_service
from routes.errors import handle_error

router = APIRouter()


@router.get("/projects/{project_id}/products", response_model=list[ProductResponse])
async def list_project_products(project_id: str):
    """Products of a project, ordered by weight."""
    try:
        return get_project_product_service().get_products(project_id)
    except Exception as e:
        return handle_error(e)


@router.get("/projects/{project_id}/products/links", response_model=list[ProjectProduct])
async def list_project_links(project_id: str):
    try:
        return get_project_product_service().get_links(project_id)
    except Exception as e:
        return handle_error(e)


@router.get("/projects/{project_id}/products/search", response_model=list[ProductResponse])
async def search_project_products(project_id: str, q: str = ""):
    """Products of a project whose name or description contains q."""
    try:
        return get_project_product_service().search_products(project_id, q)
    except Exception as e:
        return handle_error(e)


@router.post(
    "/projects/{project_id}/products/{product_id}",
    response_model=ProjectProduct,
    status_code=201
)
async def link_product(project_id: str, product_id: str):
    """Add a product to a project. Linking an already linked product succeeds."""
    try:
        return get_project_product_service().link(project_id, product_id)
    except Exception as e:
        return handle_error(e)


@router.delete("/projects/{project_id}/products/{product_id}", status_code=204)
async def unlink_product(project_id: str, product_id: str):
    """Remove a product from a project and from all of its views."""
    try:
        get_project_product_service().unlink(project_id, product_id)
        return Response(status_code=204)
    except Exception as e:
        return handle_error(e)


@router.get("/products/{product_id}/projects", response_model=list[str])
async def list_product_projects(product_id: str):
    try:
        return get_project_product_service().get_project_ids(product_id)
    except Exception as e:
        return handle_error(e)
