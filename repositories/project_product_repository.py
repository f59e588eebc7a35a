"""
Project <-> Product link storage (project_products join table).
"""

from typing import Optional
import structlog

from supabase import Client

from models.project_product import ProjectProduct
from models.product import ProductResponse
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


def _is_unique_violation(error: Exception) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def _ilike_pattern(term: str) -> str:
    """Quoted %term% pattern, safe inside a PostgREST or= filter."""
    escaped = term.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{escaped}%"'


class SupabaseProjectProductRepository:
    """Supabase-backed storage for project/product links."""

    def __init__(self, client: Client):
        self.db = client
        self.table = "project_products"

    # ===================
    # READ OPERATIONS
    # ===================

    def find_links_by_project_id(self, project_id: str) -> list[ProjectProduct]:
        try:
            result = (
                self.db.table(self.table)
                .select("project_id, product_id")
                .eq("project_id", project_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_project_links_failed",
                project_id=project_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        return [ProjectProduct(**row) for row in result.data or []]

    def find_products_by_project_id(self, project_id: str) -> list[ProductResponse]:
        """
        Get the products of a project, lightest weight first.

        Links pointing at a deleted product are skipped.
        """
        logger.debug("getting_project_products", project_id=project_id)

        try:
            result = (
                self.db.table(self.table)
                .select("product_id, products(*)")
                .eq("project_id", project_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_project_products_failed",
                project_id=project_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        products = [
            ProductResponse(**row["products"])
            for row in result.data or []
            if row.get("products")
        ]
        return sorted(products, key=lambda p: p.weight)

    def search_products(self, project_id: str, term: str) -> list[ProductResponse]:
        """
        Find products of a project whose name or description contains term.

        Matching is case-insensitive. Results are ordered by weight.
        """
        logger.debug("searching_project_products", project_id=project_id, term=term)

        try:
            links = (
                self.db.table(self.table)
                .select("product_id")
                .eq("project_id", project_id)
                .execute()
            )
            product_ids = [row["product_id"] for row in links.data or []]
            if not product_ids:
                return []

            pattern = _ilike_pattern(term)
            result = (
                self.db.table("products")
                .select("*")
                .in_("product_id", product_ids)
                .or_(f"name.ilike.{pattern},description.ilike.{pattern}")
                .order("weight")
                .execute()
            )
        except Exception as e:
            logger.error(
                "search_project_products_failed",
                project_id=project_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        return [ProductResponse(**row) for row in result.data or []]

    def find_project_ids_by_product_id(self, product_id: str) -> list[str]:
        try:
            result = (
                self.db.table(self.table)
                .select("project_id")
                .eq("product_id", product_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_product_projects_failed",
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        return [row["project_id"] for row in result.data or []]

    def find_link(self, project_id: str, product_id: str) -> Optional[ProjectProduct]:
        try:
            result = (
                self.db.table(self.table)
                .select("project_id, product_id")
                .eq("project_id", project_id)
                .eq("product_id", product_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_project_link_failed",
                project_id=project_id,
                product_id=product_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        if not result.data:
            return None
        return ProjectProduct(**result.data[0])

    # ===================
    # WRITE OPERATIONS
    # ===================

    def add_link(self, link: ProjectProduct) -> ProjectProduct:
        """
        Link a product to a project.

        An existing link is not an error: the pair is returned as is.
        """
        logger.info(
            "linking_product",
            project_id=link.project_id,
            product_id=link.product_id
        )

        try:
            self.db.table(self.table).insert(link.model_dump()).execute()
        except Exception as e:
            if _is_unique_violation(e):
                logger.info(
                    "product_already_linked",
                    project_id=link.project_id,
                    product_id=link.product_id
                )
                return link
            logger.error(
                "link_product_failed",
                project_id=link.project_id,
                product_id=link.product_id,
                error=str(e)
            )
            raise DatabaseError("insert", str(e))

        return link

    def remove_link(self, link: ProjectProduct) -> None:
        """
        Unlink a product from a project.

        The product is first taken out of every view of the project so no
        view keeps showing a product the project no longer has.

        The two deletes are separate statements, not one transaction. If
        the link delete fails, the view assignments are already gone and
        the link stays. Both deletes are idempotent, so calling
        remove_link again finishes the job.
        """
        logger.info(
            "unlinking_product",
            project_id=link.project_id,
            product_id=link.product_id
        )

        try:
            views = (
                self.db.table("views")
                .select("view_id")
                .eq("project_id", link.project_id)
                .execute()
            )
            view_ids = [row["view_id"] for row in views.data or []]

            if view_ids:
                (
                    self.db.table("view_products")
                    .delete()
                    .eq("product_id", link.product_id)
                    .in_("view_id", view_ids)
                    .execute()
                )

            (
                self.db.table(self.table)
                .delete()
                .eq("project_id", link.project_id)
                .eq("product_id", link.product_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "unlink_product_failed",
                project_id=link.project_id,
                product_id=link.product_id,
                error=str(e)
            )
            raise DatabaseError("delete", str(e))

        logger.info(
            "product_unlinked",
            project_id=link.project_id,
            product_id=link.product_id,
            views_cleared=len(view_ids)
        )
