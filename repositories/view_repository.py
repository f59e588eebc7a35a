"""
View repository: data access for views and their products.

ViewRepository is the port the use case depends on;
SupabaseViewRepository implements it against the views and
view_products tables.
"""

from abc import ABC, abstractmethod
from typing import Optional
import structlog

from supabase import Client

from models.view import ViewResponse
from models.product import ProductResponse
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


class ViewRepository(ABC):
    """Operations the view use case needs from storage."""

    # View CRUD
    @abstractmethod
    def create_view(self, project_id: str, idx: str, name: str) -> ViewResponse: ...

    @abstractmethod
    def find_by_id(self, view_id: str) -> Optional[ViewResponse]: ...

    @abstractmethod
    def find_by_project_id(self, project_id: str) -> list[ViewResponse]: ...

    @abstractmethod
    def find_by_project_id_and_idx(
        self, project_id: str, idx: str
    ) -> Optional[ViewResponse]: ...

    @abstractmethod
    def count_by_project_id(self, project_id: str) -> int: ...

    @abstractmethod
    def update_view(self, view_id: str, updates: dict) -> ViewResponse: ...

    @abstractmethod
    def delete_view(self, view_id: str) -> None: ...

    # View-Product relations
    @abstractmethod
    def assign_products_to_view(self, view_id: str, product_ids: list[str]) -> None: ...

    @abstractmethod
    def remove_products_from_view(self, view_id: str, product_ids: list[str]) -> None: ...

    @abstractmethod
    def get_products_by_view_id(self, view_id: str) -> list[ProductResponse]: ...


class SupabaseViewRepository(ViewRepository):
    """
    Supabase-backed view storage.

    Every client failure is logged and re-raised as DatabaseError.
    """

    def __init__(self, client: Client):
        self.db = client
        self.table = "views"
        self.products_table = "view_products"

    # ===================
    # READ OPERATIONS
    # ===================

    def find_by_id(self, view_id: str) -> Optional[ViewResponse]:
        logger.debug("getting_view", view_id=view_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("view_id", view_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error("get_view_failed", view_id=view_id, error=str(e))
            raise DatabaseError("select", str(e))

        if not result.data:
            return None
        return ViewResponse(**result.data[0])

    def find_by_project_id(self, project_id: str) -> list[ViewResponse]:
        """
        Get every view of a project ordered by idx.

        Args:
            project_id: Project UUID

        Returns:
            List of ViewResponse (empty if the project has none)
        """
        logger.debug("getting_project_views", project_id=project_id)

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("project_id", project_id)
                .order("idx")
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_project_views_failed",
                project_id=project_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        views = [ViewResponse(**row) for row in result.data or []]

        logger.debug(
            "project_views_retrieved",
            project_id=project_id,
            count=len(views)
        )

        return views

    def find_by_project_id_and_idx(
        self,
        project_id: str,
        idx: str
    ) -> Optional[ViewResponse]:
        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("project_id", project_id)
                .eq("idx", idx)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_view_by_idx_failed",
                project_id=project_id,
                idx=idx,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        if not result.data:
            return None
        return ViewResponse(**result.data[0])

    def count_by_project_id(self, project_id: str) -> int:
        """Number of views of a project, counted by the database."""
        try:
            result = (
                self.db.table(self.table)
                .select("view_id", count="exact")
                .eq("project_id", project_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "count_project_views_failed",
                project_id=project_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        return result.count or 0

    # ===================
    # WRITE OPERATIONS
    # ===================

    def create_view(self, project_id: str, idx: str, name: str) -> ViewResponse:
        """
        Insert a new view.

        Returns:
            Created ViewResponse
        """
        logger.info("creating_view", project_id=project_id, idx=idx)

        try:
            result = (
                self.db.table(self.table)
                .insert({
                    "project_id": project_id,
                    "idx": idx,
                    "name": name,
                })
                .execute()
            )
        except Exception as e:
            logger.error(
                "create_view_failed",
                project_id=project_id,
                idx=idx,
                error=str(e)
            )
            raise DatabaseError("insert", str(e))

        view = ViewResponse(**result.data[0])

        logger.info("view_created", view_id=view.view_id, project_id=project_id)

        return view

    def update_view(self, view_id: str, updates: dict) -> ViewResponse:
        """
        Update idx and/or name of a view.

        Args:
            view_id: View UUID
            updates: Column values; keys other than idx and name are ignored
        """
        update_data = {
            key: value
            for key, value in updates.items()
            if key in ("idx", "name") and value is not None
        }

        try:
            result = (
                self.db.table(self.table)
                .update(update_data)
                .eq("view_id", view_id)
                .execute()
            )
        except Exception as e:
            logger.error("update_view_failed", view_id=view_id, error=str(e))
            raise DatabaseError("update", str(e))

        if not result.data:
            raise DatabaseError("update", "no row returned", {"view_id": view_id})

        logger.info(
            "view_updated",
            view_id=view_id,
            fields=list(update_data.keys())
        )

        return ViewResponse(**result.data[0])

    def delete_view(self, view_id: str) -> None:
        """Delete a view. view_products rows go with it (ON DELETE CASCADE)."""
        logger.info("deleting_view", view_id=view_id)

        try:
            self.db.table(self.table).delete().eq("view_id", view_id).execute()
        except Exception as e:
            logger.error("delete_view_failed", view_id=view_id, error=str(e))
            raise DatabaseError("delete", str(e))

        logger.info("view_deleted", view_id=view_id)

    # ===================
    # VIEW-PRODUCT OPERATIONS
    # ===================

    def assign_products_to_view(self, view_id: str, product_ids: list[str]) -> None:
        """
        Replace the products of a view.

        Existing rows are removed first, then one row per product id is
        inserted.
        """
        logger.info(
            "assigning_view_products",
            view_id=view_id,
            count=len(product_ids)
        )

        try:
            (
                self.db.table(self.products_table)
                .delete()
                .eq("view_id", view_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "clear_view_products_failed",
                view_id=view_id,
                error=str(e)
            )
            raise DatabaseError("delete", f"removing existing products: {e}")

        if not product_ids:
            return

        rows = [
            {"view_id": view_id, "product_id": product_id}
            for product_id in product_ids
        ]

        try:
            self.db.table(self.products_table).insert(rows).execute()
        except Exception as e:
            logger.error(
                "assign_view_products_failed",
                view_id=view_id,
                error=str(e)
            )
            raise DatabaseError("insert", f"assigning products to view: {e}")

        logger.info("view_products_assigned", view_id=view_id, count=len(rows))

    def remove_products_from_view(self, view_id: str, product_ids: list[str]) -> None:
        logger.info(
            "removing_view_products",
            view_id=view_id,
            count=len(product_ids)
        )

        try:
            (
                self.db.table(self.products_table)
                .delete()
                .eq("view_id", view_id)
                .in_("product_id", product_ids)
                .execute()
            )
        except Exception as e:
            logger.error(
                "remove_view_products_failed",
                view_id=view_id,
                error=str(e)
            )
            raise DatabaseError("delete", f"removing products from view: {e}")

    def get_products_by_view_id(self, view_id: str) -> list[ProductResponse]:
        """
        Get the products shown in a view.

        Rows whose product no longer exists are skipped.
        """
        logger.debug("getting_view_products", view_id=view_id)

        try:
            result = (
                self.db.table(self.products_table)
                .select("product_id, products(*)")
                .eq("view_id", view_id)
                .execute()
            )
        except Exception as e:
            logger.error(
                "get_view_products_failed",
                view_id=view_id,
                error=str(e)
            )
            raise DatabaseError("select", str(e))

        return [
            ProductResponse(**row["products"])
            for row in result.data or []
            if row.get("products")
        ]
