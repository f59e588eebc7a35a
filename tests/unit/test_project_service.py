"""
Unit tests for the public project lookup.

Run: pytest tests/unit/test_project_service.py -v
"""

import pytest

from repositories.project_repository import SupabaseProjectRepository
from services.project_service import ProjectService, get_public_project_service
from exceptions import ProjectNotFoundError, DatabaseError

from tests.factories import ProjectFactory


@pytest.fixture
def service(mock_supabase) -> ProjectService:
    return ProjectService(SupabaseProjectRepository(mock_supabase))


class TestGetPublicProject:

    def test_finds_project_by_public_key(self, service, mock_supabase):
        mock_supabase.set_table_data("projects", [
            ProjectFactory.create(project_id="p1", public_key="key-1"),
            ProjectFactory.create(project_id="p2", public_key="key-2", name="Cocina"),
        ])

        project = service.get_public_project("key-2")

        assert project.project_id == "p2"
        assert project.name == "Cocina"
        assert project.public_key == "key-2"

    def test_key_is_trimmed(self, service, mock_supabase):
        mock_supabase.set_table_data("projects", [
            ProjectFactory.create(project_id="p1", public_key="key-1"),
        ])

        assert service.get_public_project(" key-1 ").project_id == "p1"

    def test_unknown_key_raises_not_found(self, service, mock_supabase):
        mock_supabase.set_table_data("projects", [ProjectFactory.create()])

        with pytest.raises(ProjectNotFoundError) as exc_info:
            service.get_public_project("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "PROJECT_NOT_FOUND"

    def test_blank_key_does_not_query(self, service, mock_supabase):
        with pytest.raises(ProjectNotFoundError):
            service.get_public_project("  ")

        assert mock_supabase.calls == []

    def test_database_error_propagates(self, service, mock_supabase):
        mock_supabase.set_error("projects", RuntimeError("down"))

        with pytest.raises(DatabaseError):
            service.get_public_project("key-1")

    def test_factory_uses_public_client(self, mock_db, mock_supabase):
        assert get_public_project_service().repository.db is mock_supabase
