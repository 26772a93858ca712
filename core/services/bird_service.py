# =============================================================================
# core/services/bird_service.py - Bird Business Logic
# =============================================================================
# Handles bird CRUD operations.
# Separates HTTP concerns from database access: routes call one method here,
# each method issues exactly one query and maps failures to API exceptions.
# =============================================================================

import logging
from datetime import datetime, timezone

from lib.supabase_client import SupabaseClient, SupabaseClientError
from core.models.bird import Bird, BirdWrite
from app.exceptions import BirdNotFoundError, BirdUpdateError, StoreError

logger = logging.getLogger(__name__)


class BirdService:
    """
    Service for bird management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def list_birds() -> list[Bird]:
        """
        List every bird in id order.

        Raises:
            StoreError: If the query fails
        """
        try:
            rows = SupabaseClient.fetch_birds()
        except SupabaseClientError as e:
            raise StoreError("list", str(e))

        return [Bird.model_validate(row) for row in rows]

    @staticmethod
    def create_bird(payload: BirdWrite) -> Bird:
        """
        Create a bird from the client's title and description.

        Returns:
            The stored bird, including its id and timestamps

        Raises:
            StoreError: If the insert fails (e.g. missing title)
        """
        try:
            row = SupabaseClient.insert_bird(payload.to_row())
        except SupabaseClientError as e:
            logger.error(f"Failed to create bird: {e}")
            raise StoreError("create", str(e))

        logger.info(f"Created bird: {row['id']}")
        return Bird.model_validate(row)

    @staticmethod
    def get_bird(bird_id: int) -> Bird:
        """
        Get a bird by ID.

        Raises:
            BirdNotFoundError: If no bird has this id
            StoreError: If the query fails
        """
        try:
            row = SupabaseClient.fetch_bird(bird_id)
        except SupabaseClientError as e:
            raise StoreError("get", str(e))

        if not row:
            raise BirdNotFoundError(bird_id)

        return Bird.model_validate(row)

    @staticmethod
    def update_bird(bird_id: int, payload: BirdWrite) -> Bird:
        """
        Replace a bird's title and description.

        Both fields are always written, so a field missing from the payload
        is stored as null. updated_at is refreshed.

        Raises:
            BirdUpdateError: If no bird has this id or the database rejects the write
        """
        data = payload.to_row()
        data["updated_at"] = datetime.now(timezone.utc).isoformat()

        try:
            row = SupabaseClient.update_bird(bird_id, data)
        except SupabaseClientError as e:
            logger.warning(f"Update of bird {bird_id} rejected: {e}")
            raise BirdUpdateError(bird_id, str(e))

        if not row:
            raise BirdUpdateError(bird_id)

        logger.info(f"Updated bird: {bird_id}")
        return Bird.model_validate(row)

    @staticmethod
    def delete_bird(bird_id: int) -> None:
        """
        Delete a bird. Deleting an unknown id is not an error.

        Raises:
            StoreError: If the delete fails
        """
        try:
            removed = SupabaseClient.delete_bird(bird_id)
        except SupabaseClientError as e:
            raise StoreError("delete", str(e))

        logger.info(f"Deleted bird {bird_id} ({removed} row(s))")
