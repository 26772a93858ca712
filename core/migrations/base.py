# =============================================================================
# core/migrations/base.py - Migration Definition
# =============================================================================
# A migration is a named pair of SQL scripts. Each script runs as a single
# statement batch through the exec_sql RPC, so it either fully applies or
# fails with a MigrationError.
# =============================================================================

import logging
from dataclasses import dataclass

from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


class MigrationError(Exception):
    """Raised when a schema change cannot be applied or reversed."""

    def __init__(self, name: str, direction: str, error: str):
        super().__init__(f"Migration {name} ({direction}) failed: {error}")
        self.name = name
        self.direction = direction
        self.error = error


@dataclass(frozen=True)
class Migration:
    """One schema change and its reversal."""

    name: str
    up_sql: str
    down_sql: str

    def up(self) -> None:
        """
        Apply the schema change.

        Raises:
            MigrationError: If the database rejects the statement
        """
        self._run("up", self.up_sql)

    def down(self) -> None:
        """
        Reverse the schema change.

        Raises:
            MigrationError: If the database rejects the statement
        """
        self._run("down", self.down_sql)

    def _run(self, direction: str, sql: str) -> None:
        logger.info(f"Running migration {self.name} ({direction})")
        try:
            SupabaseClient.exec_sql(sql)
        except SupabaseClientError as e:
            logger.error(f"Migration {self.name} ({direction}) failed: {e}")
            raise MigrationError(self.name, direction, str(e))
