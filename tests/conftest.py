"""
Shared test fixtures.

The mock Supabase client keeps table rows in memory and applies eq, in_
and ilike filters, so services can be tested against realistic query
results. Row counts are returned only when select() asks for them.
"""

import os
import re
import sys
from pathlib import Path

# Add project root to Python path
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are read at import time by main.py
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest
from unittest.mock import patch
from datetime import datetime, timezone
from typing import Generator
from uuid import uuid4

from config import get_settings, reset_connection


# ===================
# MOCK SUPABASE CLIENT
# ===================

ID_COLUMNS = {
    "views": "view_id",
    "products": "product_id",
}


# column.ilike."pattern" or column.ilike.pattern inside an or= filter
OR_ILIKE = re.compile(r'(\w+)\.ilike\.("(?:[^"\\]|\\.)*"|[^,]*)')


def _ilike_matcher(column: str, pattern: str):
    if pattern.startswith('"') and pattern.endswith('"'):
        pattern = re.sub(r'\\(.)', r'\1', pattern[1:-1])
    regex = re.compile(
        ".*".join(re.escape(part) for part in pattern.split("%")),
        re.IGNORECASE | re.DOTALL
    )
    return lambda row: regex.fullmatch(str(row.get(column) or "")) is not None


class MockSupabaseResponse:
    """Mock Supabase query response."""

    def __init__(self, data: list = None, count: int = None):
        self.data = data or []
        self.count = count


class MockSupabaseQuery:
    """Chainable query builder that runs against the client's rows."""

    def __init__(self, client: "MockSupabaseClient", table: str):
        self._client = client
        self._table = table
        self._op = "select"
        self._payload = None
        self._filters = []
        self._order = None
        self._limit = None
        self._is_single = False
        self._count = None

    # Operations

    def select(self, *args, count=None, **kwargs):
        self._op = "select"
        self._count = count
        return self

    def insert(self, data):
        self._op = "insert"
        self._payload = [data] if isinstance(data, dict) else list(data)
        return self

    def update(self, data):
        self._op = "update"
        self._payload = data
        return self

    def delete(self):
        self._op = "delete"
        return self

    # Filters

    def eq(self, column, value):
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def neq(self, column, value):
        self._filters.append(lambda row: row.get(column) != value)
        return self

    def in_(self, column, values):
        values = list(values)
        self._filters.append(lambda row: row.get(column) in values)
        return self

    def ilike(self, column, pattern):
        self._filters.append(_ilike_matcher(column, pattern))
        return self

    def or_(self, filters):
        """Only `column.ilike.pattern` conditions are understood."""
        matchers = [
            _ilike_matcher(column, pattern)
            for column, pattern in OR_ILIKE.findall(filters)
        ]
        self._filters.append(lambda row: any(m(row) for m in matchers))
        return self

    # Modifiers

    def order(self, column, desc=False, **kwargs):
        self._order = (column, desc)
        return self

    def range(self, start, end):
        return self

    def limit(self, count):
        self._limit = count
        return self

    def single(self):
        self._is_single = True
        return self

    def _matches(self, row: dict) -> bool:
        return all(f(row) for f in self._filters)

    def execute(self) -> MockSupabaseResponse:
        self._client.calls.append((self._table, self._op, self._payload))
        self._client.counts.append((self._table, self._count))

        error = self._client.errors.get((self._table, self._op)) or \
            self._client.errors.get((self._table, "*"))
        if error:
            raise error

        rows = self._client.rows(self._table)

        if self._op == "insert":
            inserted = []
            for item in self._payload:
                row = dict(item)
                id_column = ID_COLUMNS.get(self._table)
                if id_column:
                    row.setdefault(id_column, str(uuid4()))
                now = datetime.now(timezone.utc).isoformat()
                row.setdefault("created_at", now)
                row.setdefault("updated_at", now)
                rows.append(row)
                inserted.append(dict(row))
            return MockSupabaseResponse(data=inserted)

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
                row["updated_at"] = datetime.now(timezone.utc).isoformat()
            return MockSupabaseResponse(data=[dict(r) for r in matched])

        if self._op == "delete":
            self._client.set_table_data(
                self._table,
                [row for row in rows if not self._matches(row)]
            )
            return MockSupabaseResponse(data=[dict(r) for r in matched])

        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda r: r.get(column), reverse=desc)
        total = len(matched)
        if self._limit is not None:
            matched = matched[:self._limit]

        if self._is_single:
            return MockSupabaseResponse(
                data=dict(matched[0]) if matched else None,
                count=(1 if matched else 0) if self._count else None
            )
        return MockSupabaseResponse(
            data=[dict(r) for r in matched],
            count=total if self._count else None
        )


class MockSupabaseTable:
    """Entry point for queries on one table."""

    def __init__(self, client: "MockSupabaseClient", name: str):
        self._client = client
        self._name = name

    def select(self, *args, **kwargs):
        return MockSupabaseQuery(self._client, self._name).select(*args, **kwargs)

    def insert(self, data):
        return MockSupabaseQuery(self._client, self._name).insert(data)

    def update(self, data):
        return MockSupabaseQuery(self._client, self._name).update(data)

    def delete(self):
        return MockSupabaseQuery(self._client, self._name).delete()


class MockSupabaseClient:
    """Mock Supabase client."""

    def __init__(self):
        self._tables = {}
        self.errors = {}
        self.calls = []
        self.counts = []

    def set_table_data(self, table_name: str, data: list):
        """Configure mock rows for a table."""
        self._tables[table_name] = [dict(row) for row in data]

    def rows(self, table_name: str) -> list:
        return self._tables.setdefault(table_name, [])

    def set_error(self, table_name: str, error: Exception, op: str = "*"):
        """Make every `op` query on a table raise error."""
        self.errors[(table_name, op)] = error

    def table(self, name: str) -> MockSupabaseTable:
        return MockSupabaseTable(self, name)

    def ops(self, table_name: str) -> list[str]:
        """Operations executed on a table, in order."""
        return [op for table, op, _ in self.calls if table == table_name]


# ===================
# FIXTURES
# ===================

@pytest.fixture(autouse=True)
def reset_cached_clients():
    """Drop cached settings and clients between tests."""
    get_settings.cache_clear()
    reset_connection()
    yield
    get_settings.cache_clear()
    reset_connection()


@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.

    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("views", [
                {"view_id": "v1", "project_id": "p1", ...}
            ])
    """
    return MockSupabaseClient()


@pytest.fixture
def mock_db(mock_supabase) -> Generator:
    """
    Patch every client factory with the mock.

    Usage:
        def test_something(mock_db, mock_supabase):
            mock_supabase.set_table_data("views", [...])
            # Now any code using get_supabase_client() gets the mock
    """
    with patch("config.database.get_supabase_client", return_value=mock_supabase), \
            patch("services.view_service.get_supabase_client", return_value=mock_supabase), \
            patch("services.view_service.create_public_client", return_value=mock_supabase), \
            patch("services.project_service.create_public_client", return_value=mock_supabase), \
            patch("services.project_product_service.get_supabase_client", return_value=mock_supabase):
        yield mock_supabase


@pytest.fixture
def sample_view_data() -> dict:
    """Sample view row for testing."""
    return {
        "view_id": "view-uuid-1",
        "project_id": "project-uuid-1",
        "idx": "0",
        "name": "Vista 1",
        "created_at": "2025-10-01T10:00:00Z",
        "updated_at": "2025-10-01T10:00:00Z"
    }


@pytest.fixture
def sample_product_data() -> dict:
    """Sample product row for testing."""
    return {
        "product_id": "product-uuid-1",
        "admin_id": "admin-uuid-1",
        "name": "Silla Nórdica",
        "description": "Silla de roble",
        "cover_image": "https://cdn.example.com/silla/cover.jpg",
        "constants": {"frames": 36},
        "path": "https://cdn.example.com/silla/index.html",
        "weight": 2,
        "created_at": "2025-10-01T10:00:00Z",
        "updated_at": "2025-10-01T10:00:00Z"
    }


# ===================
# API TEST CLIENT
# ===================

@pytest.fixture
def test_client_with_mock_db(mock_db):
    """
    Create FastAPI test client with mocked database.

    Usage:
        def test_endpoint(test_client_with_mock_db, mock_supabase):
            mock_supabase.set_table_data("views", [...])
            response = test_client_with_mock_db.get("/api/views/v1")
    """
    from fastapi.testclient import TestClient
    from main import app

    yield TestClient(app)
