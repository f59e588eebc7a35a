"""
View use case: rules around views and the products they show.

The use case owns validation (blank ids, idx uniqueness per project,
existence checks) and delegates storage to a ViewRepository. Repository
failures are not caught here.
"""

from typing import Optional
import structlog

from config import get_supabase_client, create_public_client
from models.view import ViewCreate, ViewUpdate, ViewResponse
from models.product import ProductResponse
from repositories.view_repository import ViewRepository, SupabaseViewRepository
from exceptions import (
    ValidationError,
    ViewNotFoundError,
    ViewIdxExistsError,
)

logger = structlog.get_logger(__name__)


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def default_view_name(idx: str) -> str:
    """Name given to a view created without one: idx "0" -> "Vista 1"."""
    try:
        return f"Vista {int(idx) + 1}"
    except ValueError:
        return f"Vista {idx}"


class ViewUseCase:
    """
    View business logic.

    Handles CRUD for views and the view <-> product assignment.
    """

    def __init__(self, repository: ViewRepository):
        self.repository = repository

    # ===================
    # VIEW CRUD
    # ===================

    def create_view(self, data: ViewCreate) -> ViewResponse:
        """
        Create a new view.

        Raises:
            ValidationError: If project_id or idx is blank
            ViewIdxExistsError: If the project already has a view with idx
        """
        if _blank(data.project_id):
            raise ValidationError("project_id is required", details={"field": "project_id"})
        if _blank(data.idx):
            raise ValidationError("idx is required", details={"field": "idx"})

        existing = self.repository.find_by_project_id_and_idx(data.project_id, data.idx)
        if existing:
            raise ViewIdxExistsError(data.project_id, data.idx)

        name = data.name or default_view_name(data.idx)
        return self.repository.create_view(data.project_id, data.idx, name)

    def get_view_by_id(self, view_id: str) -> Optional[ViewResponse]:
        if _blank(view_id):
            return None
        return self.repository.find_by_id(view_id)

    def get_views_by_project_id(self, project_id: str) -> list[ViewResponse]:
        if _blank(project_id):
            return []
        return self.repository.find_by_project_id(project_id)

    def get_view_by_project_id_and_idx(
        self,
        project_id: str,
        idx: str
    ) -> Optional[ViewResponse]:
        if _blank(project_id) or _blank(idx):
            return None
        return self.repository.find_by_project_id_and_idx(project_id, idx)

    def count_views(self, project_id: str) -> int:
        if _blank(project_id):
            return 0
        return self.repository.count_by_project_id(project_id)

    def update_view(self, view_id: str, data: ViewUpdate) -> ViewResponse:
        """
        Update idx and/or name of a view.

        Raises:
            ValidationError: If view_id is blank
            ViewNotFoundError: If the view doesn't exist
            ViewIdxExistsError: If the new idx is taken in the same project
        """
        existing = self._require_view(view_id)

        if data.idx and data.idx != existing.idx:
            clash = self.repository.find_by_project_id_and_idx(
                existing.project_id,
                data.idx
            )
            if clash:
                raise ViewIdxExistsError(existing.project_id, data.idx)

        updates = data.model_dump(exclude_none=True)
        if not updates:
            return existing

        return self.repository.update_view(view_id, updates)

    def delete_view(self, view_id: str) -> None:
        self._require_view(view_id)
        self.repository.delete_view(view_id)

    # ===================
    # VIEW-PRODUCT OPERATIONS
    # ===================

    def assign_products_to_view(self, view_id: str, product_ids: list[str]) -> None:
        """
        Make product_ids the exact product set of a view.

        An empty list clears the view.

        Raises:
            ValidationError: If view_id is blank
            ViewNotFoundError: If the view doesn't exist
        """
        self._require_view(view_id)

        if not product_ids:
            current = self.repository.get_products_by_view_id(view_id)
            if current:
                self.repository.remove_products_from_view(
                    view_id,
                    [p.product_id for p in current]
                )
            logger.info("view_products_cleared", view_id=view_id, removed=len(current))
            return

        unique_ids = list(dict.fromkeys(product_ids))
        self.repository.assign_products_to_view(view_id, unique_ids)

    def remove_products_from_view(self, view_id: str, product_ids: list[str]) -> None:
        if _blank(view_id):
            raise ValidationError("view_id is required", details={"field": "view_id"})
        if not product_ids:
            raise ValidationError(
                "At least one product_id is required",
                details={"field": "product_ids"}
            )
        self.repository.remove_products_from_view(view_id, product_ids)

    def get_products_by_view_id(self, view_id: str) -> list[ProductResponse]:
        if _blank(view_id):
            return []
        return self.repository.get_products_by_view_id(view_id)

    # ===================
    # HELPERS
    # ===================

    def _require_view(self, view_id: str) -> ViewResponse:
        if _blank(view_id):
            raise ValidationError("view_id is required", details={"field": "view_id"})
        view = self.repository.find_by_id(view_id)
        if view is None:
            raise ViewNotFoundError(view_id)
        return view


def get_view_use_case() -> ViewUseCase:
    """ViewUseCase over the session client."""
    return ViewUseCase(SupabaseViewRepository(get_supabase_client()))


def get_public_view_use_case() -> ViewUseCase:
    """ViewUseCase over a fresh anonymous client. Read operations only."""
    return ViewUseCase(SupabaseViewRepository(create_public_client()))
