"""
View API routes.

Every handler builds its use case per request and lets AppError
subclasses through to handle_error untouched.
"""

from fastapi import APIRouter, Response

from models.view import (
    ViewCreate,
    ViewUpdate,
    ViewResponse,
    ViewProductsUpdate,
    ViewCountResponse,
)
from models.product import ProductResponse
from services.view_service import get_view_use_case
from exceptions import ViewNotFoundError, NotFoundError
from routes.errors import handle_error


router = APIRouter()


# ===================
# VIEW CRUD
# ===================

@router.post("", response_model=ViewResponse, status_code=201)
async def create_view(data: ViewCreate):
    """
    Create a new view.

    Raises:
        409: idx already used in this project
        422: Validation error
    """
    try:
        return get_view_use_case().create_view(data)
    except Exception as e:
        return handle_error(e)


@router.get("/{view_id}", response_model=ViewResponse)
async def get_view(view_id: str):
    """
    Get a single view by ID.

    Raises:
        404: View not found
    """
    try:
        view = get_view_use_case().get_view_by_id(view_id)
        if view is None:
            raise ViewNotFoundError(view_id)
        return view
    except Exception as e:
        return handle_error(e)


@router.patch("/{view_id}", response_model=ViewResponse)
async def update_view(view_id: str, data: ViewUpdate):
    """
    Update a view's idx and/or name.

    Raises:
        404: View not found
        409: New idx already used in this project
    """
    try:
        return get_view_use_case().update_view(view_id, data)
    except Exception as e:
        return handle_error(e)


@router.delete("/{view_id}", status_code=204)
async def delete_view(view_id: str):
    """
    Delete a view and its product assignments.

    Raises:
        404: View not found
    """
    try:
        get_view_use_case().delete_view(view_id)
        return Response(status_code=204)
    except Exception as e:
        return handle_error(e)


# ===================
# PROJECT LOOKUPS
# ===================

@router.get("/project/{project_id}", response_model=list[ViewResponse])
async def list_project_views(project_id: str):
    """List the views of a project ordered by idx."""
    try:
        return get_view_use_case().get_views_by_project_id(project_id)
    except Exception as e:
        return handle_error(e)


@router.get("/project/{project_id}/idx/{idx}", response_model=ViewResponse)
async def get_project_view_by_idx(project_id: str, idx: str):
    try:
        view = get_view_use_case().get_view_by_project_id_and_idx(project_id, idx)
        if view is None:
            raise NotFoundError("View", f"{project_id}/{idx}", code="VIEW_NOT_FOUND")
        return view
    except Exception as e:
        return handle_error(e)


@router.get("/project/{project_id}/count", response_model=ViewCountResponse)
async def count_project_views(project_id: str):
    try:
        count = get_view_use_case().count_views(project_id)
        return ViewCountResponse(project_id=project_id, count=count)
    except Exception as e:
        return handle_error(e)


# ===================
# VIEW PRODUCTS
# ===================

@router.get("/{view_id}/products", response_model=list[ProductResponse])
async def list_view_products(view_id: str):
    try:
        return get_view_use_case().get_products_by_view_id(view_id)
    except Exception as e:
        return handle_error(e)


@router.put("/{view_id}/products", status_code=204)
async def assign_view_products(view_id: str, data: ViewProductsUpdate):
    """
    Replace the products of a view.

    An empty product_ids list clears the view.

    Raises:
        404: View not found
    """
    try:
        get_view_use_case().assign_products_to_view(view_id, data.product_ids)
        return Response(status_code=204)
    except Exception as e:
        return handle_error(e)


@router.post("/{view_id}/products/remove", status_code=204)
async def remove_view_products(view_id: str, data: ViewProductsUpdate):
    """
    Remove some products from a view.

    Raises:
        422: No product ids given
    """
    try:
        get_view_use_case().remove_products_from_view(view_id, data.product_ids)
        return Response(status_code=204)
    except Exception as e:
        return handle_error(e)
