# =============================================================================
# core/migrations/runner.py - Migration Runner
# =============================================================================
# Applies and rolls back registered migrations, recording which ones have run
# in the schema_migrations table.
#
# Usage:
#   from core.migrations.runner import migrate_latest, rollback, status
#   applied = migrate_latest()
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient, SupabaseClientError
from core.migrations import MIGRATIONS
from core.migrations.base import Migration, MigrationError

logger = logging.getLogger(__name__)

MIGRATIONS_TABLE = "schema_migrations"

_BOOKKEEPING_SQL = f"""
CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
    name            TEXT PRIMARY KEY,
    applied_at      TIMESTAMPTZ NOT NULL DEFAULT now()
);
"""

# PostgREST caches the schema; new or dropped tables are invisible to the
# query builder until it reloads.
_RELOAD_SCHEMA_SQL = "NOTIFY pgrst, 'reload schema';"


def _ensure_bookkeeping() -> None:
    try:
        SupabaseClient.exec_sql(_BOOKKEEPING_SQL)
        SupabaseClient.exec_sql(_RELOAD_SCHEMA_SQL)
    except SupabaseClientError as e:
        raise MigrationError(MIGRATIONS_TABLE, "up", str(e))


def _applied_names() -> list[str]:
    try:
        response = (
            SupabaseClient.get_client()
            .table(MIGRATIONS_TABLE)
            .select("name")
            .order("name")
            .execute()
        )
    except Exception as e:
        raise MigrationError(MIGRATIONS_TABLE, "read", str(e))
    return [row["name"] for row in response.data or []]


def _record(migration: Migration) -> None:
    try:
        SupabaseClient.get_client().table(MIGRATIONS_TABLE).insert(
            {"name": migration.name}
        ).execute()
    except Exception as e:
        raise MigrationError(migration.name, "record", str(e))


def _forget(migration: Migration) -> None:
    try:
        SupabaseClient.get_client().table(MIGRATIONS_TABLE).delete().eq(
            "name", migration.name
        ).execute()
    except Exception as e:
        raise MigrationError(migration.name, "forget", str(e))


def _reload_schema() -> None:
    try:
        SupabaseClient.exec_sql(_RELOAD_SCHEMA_SQL)
    except SupabaseClientError as e:
        logger.warning(f"Schema reload notification failed: {e}")


def status(migrations: list[Migration] = MIGRATIONS) -> list[tuple[str, bool]]:
    """
    Report which migrations have been applied.

    Returns:
        (name, applied) pairs in registry order
    """
    _ensure_bookkeeping()
    applied = set(_applied_names())
    return [(m.name, m.name in applied) for m in migrations]


def migrate_latest(migrations: list[Migration] = MIGRATIONS) -> list[str]:
    """
    Apply every migration that has not run yet, in registry order.

    Stops at the first failure; migrations applied before it stay applied.

    Returns:
        Names of the migrations applied by this call

    Raises:
        MigrationError: If a migration or its bookkeeping fails
    """
    _ensure_bookkeeping()
    applied = set(_applied_names())

    ran = []
    for migration in migrations:
        if migration.name in applied:
            continue
        migration.up()
        _record(migration)
        ran.append(migration.name)
        logger.info(f"Applied migration {migration.name}")

    if ran:
        _reload_schema()
    else:
        logger.info("Already up to date")
    return ran


def rollback(migrations: list[Migration] = MIGRATIONS) -> str | None:
    """
    Reverse the most recently applied migration.

    Returns:
        Name of the migration rolled back, or None if nothing was applied

    Raises:
        MigrationError: If the reversal or its bookkeeping fails
    """
    _ensure_bookkeeping()
    applied = set(_applied_names())

    for migration in reversed(migrations):
        if migration.name in applied:
            migration.down()
            _forget(migration)
            _reload_schema()
            logger.info(f"Rolled back migration {migration.name}")
            return migration.name

    logger.info("Nothing to roll back")
    return None
