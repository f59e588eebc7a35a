"""
Project <-> Product link management.
"""

import structlog

from config import get_supabase_client
from models.project_product import ProjectProduct
from models.product import ProductResponse
from repositories.project_product_repository import SupabaseProjectProductRepository
from exceptions import ValidationError

logger = structlog.get_logger(__name__)


class ProjectProductService:
    """
    Link and unlink products to projects.

    Identifiers are checked here; uniqueness is left to the table's
    primary key.
    """

    def __init__(self, repository: SupabaseProjectProductRepository):
        self.repository = repository

    def link(self, project_id: str, product_id: str) -> ProjectProduct:
        """
        Add a product to a project. Linking twice is a no-op.

        Raises:
            ValidationError: If either id is blank
        """
        link = self._build_link(project_id, product_id)
        return self.repository.add_link(link)

    def unlink(self, project_id: str, product_id: str) -> None:
        """Remove a product from a project and from the project's views."""
        link = self._build_link(project_id, product_id)
        self.repository.remove_link(link)

    def get_links(self, project_id: str) -> list[ProjectProduct]:
        self._require("project_id", project_id)
        return self.repository.find_links_by_project_id(project_id)

    def get_products(self, project_id: str) -> list[ProductResponse]:
        self._require("project_id", project_id)
        return self.repository.find_products_by_project_id(project_id)

    def search_products(self, project_id: str, term: str) -> list[ProductResponse]:
        """
        Products of a project matching term in name or description.

        A blank term returns every product of the project.
        """
        self._require("project_id", project_id)
        term = (term or "").strip()
        if not term:
            return self.repository.find_products_by_project_id(project_id)
        return self.repository.search_products(project_id, term)

    def get_project_ids(self, product_id: str) -> list[str]:
        self._require("product_id", product_id)
        return self.repository.find_project_ids_by_product_id(product_id)

    def _build_link(self, project_id: str, product_id: str) -> ProjectProduct:
        self._require("project_id", project_id)
        self._require("product_id", product_id)
        return ProjectProduct(project_id=project_id.strip(), product_id=product_id.strip())

    @staticmethod
    def _require(field: str, value: str) -> None:
        if value is None or not value.strip():
            raise ValidationError(f"{field} is required", details={"field": field})


def get_project_product_service() -> ProjectProductService:
    """ProjectProductService over the session client."""
    return ProjectProductService(SupabaseProjectProductRepository(get_supabase_client()))
