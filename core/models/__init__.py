# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - bird.py: Bird record and write payload schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .bird import (
    TITLE_MAX_LENGTH,
    Bird,
    BirdWrite,
)

__all__ = [
    "TITLE_MAX_LENGTH",
    "Bird",
    "BirdWrite",
]
