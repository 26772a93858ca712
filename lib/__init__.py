# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for database operations
# - negotiation.py: Accept header parsing for JSON/HTML responses
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.negotiation import MediaRange, parse_accept, best_match

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Content negotiation
    "MediaRange",
    "parse_accept",
    "best_match",
]
