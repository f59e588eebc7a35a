"""
Shared project lookup.

A project shared publicly is found by its public key through the
anonymous client.
"""

import structlog

from config import create_public_client
from models.project import ProjectResponse
from repositories.project_repository import SupabaseProjectRepository
from exceptions import ProjectNotFoundError

logger = structlog.get_logger(__name__)


class ProjectService:

    def __init__(self, repository: SupabaseProjectRepository):
        self.repository = repository

    def get_public_project(self, public_key: str) -> ProjectResponse:
        """
        Get the project shared under public_key.

        Raises:
            ProjectNotFoundError: If the key is blank or unknown
        """
        key = (public_key or "").strip()
        if not key:
            raise ProjectNotFoundError(public_key or "")

        project = self.repository.find_by_public_key(key)
        if project is None:
            logger.info("public_project_not_found")
            raise ProjectNotFoundError(key)
        return project


def get_public_project_service() -> ProjectService:
    """ProjectService over a fresh anonymous client."""
    return ProjectService(SupabaseProjectRepository(create_public_client()))
