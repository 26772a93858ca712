# =============================================================================
# tests/test_migrations.py - Schema Migration Tests
# =============================================================================
# Tests the birds table migration and the runner's bookkeeping.
# SQL goes to the in-memory Supabase from conftest.py, which records every
# statement instead of executing it.
# =============================================================================

import pytest

from core.migrations import MIGRATIONS, Migration, MigrationError
from core.migrations.create_birds_table import DOWN_SQL, UP_SQL, migration
from core.migrations.runner import MIGRATIONS_TABLE, migrate_latest, rollback, status


def normalized(sql):
    return " ".join(sql.split())


# =============================================================================
# create_birds_table
# =============================================================================

class TestCreateBirdsTable:
    """The birds table definition."""

    def test_registered(self):
        assert MIGRATIONS == [migration]
        assert migration.name == "20180111134841_create_birds_table"

    def test_up_defines_columns(self):
        sql = normalized(UP_SQL)

        assert sql.startswith("CREATE TABLE birds (")
        assert "IF NOT EXISTS" not in sql
        assert "id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY" in sql
        assert "title VARCHAR(100) NOT NULL" in sql
        assert "description TEXT," in sql
        assert "created_at TIMESTAMPTZ" in sql
        assert "updated_at TIMESTAMPTZ" in sql

    def test_down_drops_unconditionally(self):
        assert normalized(DOWN_SQL) == "DROP TABLE birds;"

    def test_up_and_down_run_their_sql(self, fake_supabase):
        migration.up()
        migration.down()

        assert fake_supabase.sql == [UP_SQL, DOWN_SQL]

    def test_failure_raises_migration_error(self, fake_supabase):
        fake_supabase.failures["rpc"] = RuntimeError('relation "birds" already exists')

        with pytest.raises(MigrationError) as exc_info:
            migration.up()

        assert exc_info.value.name == migration.name
        assert exc_info.value.direction == "up"
        assert "already exists" in exc_info.value.error


# =============================================================================
# Runner
# =============================================================================

@pytest.fixture
def two_migrations():
    return [
        Migration(name="001_first", up_sql="CREATE TABLE a ();", down_sql="DROP TABLE a;"),
        Migration(name="002_second", up_sql="CREATE TABLE b ();", down_sql="DROP TABLE b;"),
    ]


def applied(fake_supabase):
    return [row["name"] for row in fake_supabase.tables.get(MIGRATIONS_TABLE, [])]


class TestRunner:
    """Test migrate_latest, rollback and status."""

    def test_latest_applies_in_order(self, fake_supabase, two_migrations):
        ran = migrate_latest(two_migrations)

        assert ran == ["001_first", "002_second"]
        assert applied(fake_supabase) == ["001_first", "002_second"]
        ddl = [sql for sql in fake_supabase.sql if sql in ("CREATE TABLE a ();", "CREATE TABLE b ();")]
        assert ddl == ["CREATE TABLE a ();", "CREATE TABLE b ();"]

    def test_latest_creates_bookkeeping_table(self, fake_supabase, two_migrations):
        migrate_latest(two_migrations)

        assert f"CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE}" in fake_supabase.sql[0]

    def test_latest_skips_applied(self, fake_supabase, two_migrations):
        migrate_latest(two_migrations[:1])

        ran = migrate_latest(two_migrations)

        assert ran == ["002_second"]
        assert fake_supabase.sql.count("CREATE TABLE a ();") == 1

    def test_latest_when_up_to_date(self, fake_supabase, two_migrations):
        migrate_latest(two_migrations)

        assert migrate_latest(two_migrations) == []

    def test_latest_stops_at_failure(self, fake_supabase, two_migrations):
        class BrokenMigration(Migration):
            def up(self):
                raise MigrationError(self.name, "up", "syntax error")

        broken = BrokenMigration("002_second", "CREATE TABLE b ();", "DROP TABLE b;")

        with pytest.raises(MigrationError):
            migrate_latest([two_migrations[0], broken])

        assert applied(fake_supabase) == ["001_first"]

    def test_rollback_reverses_latest(self, fake_supabase, two_migrations):
        migrate_latest(two_migrations)

        name = rollback(two_migrations)

        assert name == "002_second"
        assert "DROP TABLE b;" in fake_supabase.sql
        assert "DROP TABLE a;" not in fake_supabase.sql
        assert applied(fake_supabase) == ["001_first"]

    def test_rollback_with_nothing_applied(self, fake_supabase, two_migrations):
        assert rollback(two_migrations) is None

    def test_status(self, fake_supabase, two_migrations):
        migrate_latest(two_migrations[:1])

        assert status(two_migrations) == [("001_first", True), ("002_second", False)]

    def test_bookkeeping_failure(self, fake_supabase, two_migrations):
        fake_supabase.failures["rpc"] = RuntimeError("function exec_sql does not exist")

        with pytest.raises(MigrationError):
            migrate_latest(two_migrations)

    def test_record_failure(self, fake_supabase, two_migrations):
        fake_supabase.failures["insert"] = RuntimeError("permission denied")

        with pytest.raises(MigrationError) as exc_info:
            migrate_latest(two_migrations)

        assert exc_info.value.direction == "record"
