# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .bird_service import BirdService

__all__ = [
    "BirdService",
]
