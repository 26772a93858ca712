# =============================================================================
# core/migrations/create_birds_table.py - birds Table
# =============================================================================
# Creates the table holding every bird record (settings.BIRDS_TABLE), and
# drops it on rollback.
# Neither statement is guarded with IF [NOT] EXISTS: running up twice, or
# down without up, fails the migration.
# =============================================================================

from app.config import settings
from core.migrations.base import Migration

UP_SQL = f"""
CREATE TABLE {settings.BIRDS_TABLE} (
    id              BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    title           VARCHAR(100) NOT NULL,
    description     TEXT,
    created_at      TIMESTAMPTZ DEFAULT now(),
    updated_at      TIMESTAMPTZ DEFAULT now()
);
"""

DOWN_SQL = f"""
DROP TABLE {settings.BIRDS_TABLE};
"""

migration = Migration(
    name="20180111134841_create_birds_table",
    up_sql=UP_SQL,
    down_sql=DOWN_SQL,
)
