"""
Public (anonymous) read routes for shared projects.

Served through the public client, which never keeps or refreshes a
session.
"""

from fastapi import APIRouter

from models.view import ViewResponse
from models.project import ProjectResponse
from models.product import ProductResponse
from services.view_service import get_public_view_use_case
from services.project_service import get_public_project_service
from routes.errors import handle_error

router = APIRouter()


@router.get("/projects/{project_id}/views", response_model=list[ViewResponse])
async def list_public_views(project_id: str):
    try:
        return get_public_view_use_case().get_views_by_project_id(project_id)
    except Exception as e:
        return handle_error(e)


@router.get("/views/{view_id}/products", response_model=list[ProductResponse])
async def list_public_view_products(view_id: str):
    try:
        return get_public_view_use_case().get_products_by_view_id(view_id)
    except Exception as e:
        return handle_error(e)


@router.get("/projects/key/{public_key}", response_model=ProjectResponse)
async def get_public_project(public_key: str):
    """
    Get a shared project by its public key.

    Raises:
        404: No project is shared under this key
    """
    try:
        return get_public_project_service().get_public_project(public_key)
    except Exception as e:
        return handle_error(e)
