# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Birds API:
# - test_birds_api.py: Endpoint tests through FastAPI's TestClient
# - test_bird_service.py: Service error mapping with a mocked database
# - test_models.py: Pydantic model validation
# - test_negotiation.py: Accept header negotiation
# - test_migrations.py / test_migrate_script.py: Schema migrations
# - test_supabase_client.py / test_config.py: Infrastructure
#
# Run tests with: pytest
# =============================================================================
