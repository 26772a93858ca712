# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the database-facing logic:
# - models/: Pydantic schemas for data validation
# - services/: One service per resource, called by the routers
# - migrations/: Schema definition and the migration runner
# =============================================================================
