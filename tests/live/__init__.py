"""Live integration tests for the search client.

These tests call the real search endpoint and are excluded from regular test
runs by default.

Usage:
    # Run all live tests (explicitly include them)
    GSEARCH_LIVE=1 pytest -m live -v tests/live

    # Live tests are EXCLUDED by default
    pytest -v  # Will NOT run live tests
"""
