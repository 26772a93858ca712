# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory stand-in for the Supabase query builder
# - Provides a TestClient wired to that stand-in
# =============================================================================

import os
from datetime import datetime, timezone

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from lib.supabase_client import SupabaseClient


# =============================================================================
# In-memory Supabase
# =============================================================================

class FakeResponse:
    """Mimics the APIResponse returned by execute()."""

    def __init__(self, data):
        self.data = data


class FakeQuery:
    """
    Chainable query supporting the subset of the PostgREST builder the
    application uses: select/insert/update/delete, eq, order, limit, execute.
    """

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.op = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.descending = False
        self.row_limit = None

    def select(self, *columns):
        self.op = "select"
        return self

    def insert(self, data):
        self.op = "insert"
        self.payload = dict(data)
        return self

    def update(self, data):
        self.op = "update"
        self.payload = dict(data)
        return self

    def delete(self):
        self.op = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def _check_constraints(self, row):
        if self.table != "birds":
            return
        title = row.get("title")
        if title is None:
            raise RuntimeError('null value in column "title" violates not-null constraint')
        if len(title) > 100:
            raise RuntimeError("value too long for type character varying(100)")

    def execute(self):
        if self.op in self.db.failures:
            raise self.db.failures[self.op]

        rows = self.db.tables.setdefault(self.table, [])
        now = datetime.now(timezone.utc).isoformat()

        if self.op == "insert":
            row = dict(self.payload)
            if self.table == "birds":
                self.db.last_id += 1
                row.setdefault("created_at", now)
                row.setdefault("updated_at", now)
                row["id"] = self.db.last_id
            self._check_constraints(row)
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self.op == "update":
            for row in matched:
                self._check_constraints({**row, **self.payload})
            for row in matched:
                row.update(self.payload)
            return FakeResponse([dict(row) for row in matched])

        if self.op == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            return FakeResponse([dict(row) for row in matched])

        if self.order_by:
            matched.sort(key=lambda row: row[self.order_by], reverse=self.descending)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([dict(row) for row in matched])


class FakeRpc:
    def __init__(self, db: "FakeSupabase", name: str, params: dict):
        self.db = db
        self.name = name
        self.params = params

    def execute(self):
        if "rpc" in self.db.failures:
            raise self.db.failures["rpc"]
        self.db.sql.append(self.params["query"])
        return FakeResponse(None)


class FakeSupabase:
    """
    In-memory replacement for the supabase Client.

    Tables are lists of dicts. Set ``failures[op] = exc`` to make every
    ``op`` ("select", "insert", "update", "delete", "rpc") raise ``exc``.
    """

    def __init__(self):
        self.tables = {}
        self.failures = {}
        self.sql = []
        self.last_id = 0

    def table(self, name):
        return FakeQuery(self, name)

    def rpc(self, name, params):
        return FakeRpc(self, name, params)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase(monkeypatch):
    """Install an empty in-memory database as the Supabase singleton."""
    fake = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", fake)
    return fake


@pytest.fixture
def client(fake_supabase):
    """TestClient for the app, backed by fake_supabase."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_bird_row():
    """A bird row as the database returns it."""
    return {
        "id": 1,
        "title": "Owl",
        "description": "Nocturnal",
        "created_at": "2024-01-15T10:30:00+00:00",
        "updated_at": "2024-01-15T10:30:00+00:00",
    }
