# =============================================================================
# core/migrations/ - Database Schema Migrations
# =============================================================================
# This package contains the schema history of the service:
# - base.py: Migration definition and MigrationError
# - create_birds_table.py: The birds table
# - runner.py: Apply / roll back / report, tracked in schema_migrations
#
# MIGRATIONS lists every migration in the order it must be applied.
# New migrations are appended, never inserted.
# =============================================================================

from .base import Migration, MigrationError
from .create_birds_table import migration as create_birds_table

MIGRATIONS: list[Migration] = [
    create_birds_table,
]

__all__ = [
    "MIGRATIONS",
    "Migration",
    "MigrationError",
]
