#!/usr/bin/env python3
# =============================================================================
# scripts/migrate.py - Schema Migration CLI
# =============================================================================
# Applies or rolls back the database schema.
#
# Usage:
#   # Apply every pending migration
#   python scripts/migrate.py latest
#
#   # Undo the most recent migration
#   python scripts/migrate.py rollback
#
#   # Show which migrations have run
#   python scripts/migrate.py status
#
# Prerequisites:
#   - supabase/migrations/00000000000000_exec_sql.sql applied to the database
#   - Environment variables must be set (.env file)
# =============================================================================

import argparse
import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.migrations import MigrationError
from core.migrations.runner import migrate_latest, rollback, status


def main(argv: list[str] | None = None) -> int:
    """Run one migration command and return the process exit code."""
    parser = argparse.ArgumentParser(description="Birds API schema migrations")
    parser.add_argument("command", choices=["latest", "rollback", "status"])
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        if args.command == "latest":
            ran = migrate_latest()
            print(f"Applied {len(ran)} migration(s)")
            for name in ran:
                print(f"  + {name}")
        elif args.command == "rollback":
            name = rollback()
            print(f"Rolled back: {name}" if name else "Nothing to roll back")
        else:
            for name, applied in status():
                print(f"  [{'x' if applied else ' '}] {name}")
    except MigrationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
