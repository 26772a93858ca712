# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides one method per query the application issues:
# - Select all birds / select one bird by id
# - Insert, update and delete returning the affected rows
# - Raw SQL through the exec_sql RPC (schema migrations only)
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   birds = SupabaseClient.fetch_birds()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Provides actionable error messages:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        bird = SupabaseClient.insert_bird({"title": "Owl", "description": None})
        same = SupabaseClient.fetch_bird(bird["id"])
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (next call to get_client creates a new one)."""
        cls._instance = None

    @classmethod
    def _table(cls):
        return cls.get_client().table(settings.BIRDS_TABLE)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_birds(cls) -> list[dict[str, Any]]:
        """
        Fetch every bird, oldest first.

        Raises:
            SupabaseClientError: If query fails
        """
        try:
            response = (
                cls._table()
                .select("*")
                .order("id")
                .execute()
            )
            birds = response.data or []
            logger.debug(f"Fetched {len(birds)} birds")
            return birds

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch birds: {e}",
                code="FETCH_BIRDS_FAILED",
                suggestion="Check that the birds table exists (run scripts/migrate.py latest)",
            )

    @classmethod
    def fetch_bird(cls, bird_id: int) -> dict[str, Any] | None:
        """
        Fetch a single bird by ID.

        Returns:
            Bird dict, or None if no row matches

        Raises:
            SupabaseClientError: If query fails
        """
        try:
            response = (
                cls._table()
                .select("*")
                .eq("id", bird_id)
                .limit(1)
                .execute()
            )
            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch bird: {e}",
                code="FETCH_BIRD_FAILED",
                details={"bird_id": bird_id}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_bird(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a bird and return the stored row (with id and timestamps).

        Raises:
            SupabaseClientError: If the insert fails or returns nothing
        """
        try:
            response = cls._table().insert(data).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert bird: {e}",
                code="INSERT_BIRD_FAILED",
                suggestion="title is required and limited to 100 characters",
                details={"data": data}
            )

        if not response.data:
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_BIRD_FAILED",
                details={"data": data}
            )
        return response.data[0]

    @classmethod
    def update_bird(cls, bird_id: int, data: dict[str, Any]) -> dict[str, Any] | None:
        """
        Update a bird and return the updated row.

        Returns:
            Updated bird dict, or None if no row matched

        Raises:
            SupabaseClientError: If the update fails
        """
        try:
            response = (
                cls._table()
                .update(data)
                .eq("id", bird_id)
                .execute()
            )
            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update bird: {e}",
                code="UPDATE_BIRD_FAILED",
                details={"bird_id": bird_id, "data": data}
            )

    @classmethod
    def delete_bird(cls, bird_id: int) -> int:
        """
        Delete a bird.

        Returns:
            Number of rows removed (0 when nothing matched)

        Raises:
            SupabaseClientError: If the delete fails
        """
        try:
            response = (
                cls._table()
                .delete()
                .eq("id", bird_id)
                .execute()
            )
            return len(response.data or [])

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete bird: {e}",
                code="DELETE_BIRD_FAILED",
                details={"bird_id": bird_id}
            )

    # -------------------------------------------------------------------------
    # Raw SQL
    # -------------------------------------------------------------------------

    @classmethod
    def exec_sql(cls, query: str) -> Any:
        """
        Run raw SQL through the ``exec_sql`` Postgres function.

        The function must exist in the database; see
        supabase/migrations/00000000000000_exec_sql.sql.

        Raises:
            SupabaseClientError: If the statement fails
        """
        try:
            response = cls.get_client().rpc("exec_sql", {"query": query}).execute()
            return response.data

        except Exception as e:
            raise SupabaseClientError(
                message=f"SQL execution failed: {e}",
                code="EXEC_SQL_FAILED",
                details={"query": query}
            )

    @classmethod
    def ping(cls) -> None:
        """
        Issue the cheapest possible query against the birds table.

        Raises:
            SupabaseClientError: If the database is unreachable
        """
        try:
            cls._table().select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Database unreachable: {e}",
                code="PING_FAILED",
            )
