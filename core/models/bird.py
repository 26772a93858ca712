# =============================================================================
# core/models/bird.py - Bird Schemas
# =============================================================================
# These models define the API contract for bird operations:
# - BirdWrite: Fields a client may send when creating or updating a bird
# - Bird: A stored bird as returned to clients
#
# A bird is the only resource of the service. The database owns id and
# the timestamps; clients only ever supply title and description.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TITLE_MAX_LENGTH = 100


class BirdWrite(BaseModel):
    """
    Schema for the body of POST /birds and PATCH /birds/{bird_id}.

    Both fields are optional here; the database rejects a missing title.
    Unknown keys (id, created_at, ...) are dropped.

    Example:
        {
            "title": "Owl",
            "description": "Nocturnal"
        }
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default=None,
        description=f"Display name of the bird (required by the database, max {TITLE_MAX_LENGTH} chars)"
    )

    description: str | None = Field(
        default=None,
        description="Free-form notes"
    )

    def to_row(self) -> dict:
        """Column values to write; omitted fields are written as null."""
        return {"title": self.title, "description": self.description}


class Bird(BaseModel):
    """
    Schema for returning bird data to clients.

    Returned by:
    - GET /birds (as a list)
    - POST /birds
    - GET /birds/{bird_id}
    - PATCH /birds/{bird_id}

    Example:
        {
            "id": 1,
            "title": "Owl",
            "description": "Nocturnal",
            "created_at": "2024-01-15T10:30:00Z",
            "updated_at": "2024-01-15T10:30:00Z"
        }
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(
        ...,
        description="Unique bird identifier (assigned by the database)"
    )

    title: str = Field(
        ...,
        max_length=TITLE_MAX_LENGTH,
        description="Display name of the bird"
    )

    description: str | None = Field(
        default=None,
        description="Free-form notes"
    )

    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the bird was created"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Timestamp of the last update"
    )
