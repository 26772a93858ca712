# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - birds.py: Bird CRUD endpoints and HTML views
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import birds

__all__ = [
    "health",
    "birds",
]
