"""
Project lookups (projects table).
"""

from typing import Optional
import structlog

from supabase import Client

from models.project import ProjectResponse
from exceptions import DatabaseError

logger = structlog.get_logger(__name__)


class SupabaseProjectRepository:
    """Read access to projects."""

    def __init__(self, client: Client):
        self.db = client
        self.table = "projects"

    def find_by_public_key(self, public_key: str) -> Optional[ProjectResponse]:
        logger.debug("getting_project_by_public_key")

        try:
            result = (
                self.db.table(self.table)
                .select("*")
                .eq("public_key", public_key)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error("get_project_by_public_key_failed", error=str(e))
            raise DatabaseError("select", str(e))

        if not result.data:
            return None
        return ProjectResponse(**result.data[0])
