"""Pytest configuration and fixtures for live integration tests."""

import os

import pytest
from dotenv import load_dotenv

from gsearch import GoogleSearch


@pytest.fixture(scope="session")
def live_enabled() -> None:
    """Skip live tests unless explicitly enabled.

    The live endpoint needs outbound network access, so the suite only runs
    when ``GSEARCH_LIVE`` is set (or in CI).
    """
    load_dotenv()

    is_ci = os.getenv("CI") == "true" or os.getenv("GITHUB_ACTIONS") == "true"
    if not is_ci and not os.getenv("GSEARCH_LIVE"):
        pytest.skip("Set GSEARCH_LIVE=1 to run live search tests")


@pytest.fixture
def client(live_enabled: None) -> GoogleSearch:
    return GoogleSearch(timeout=10000)
