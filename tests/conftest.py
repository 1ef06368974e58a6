"""
Pytest Configuration
====================
Shared fixtures for all tests.
"""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env():
    """Set up test environment variables before any tests run."""
    os.environ["ACTIVITY_API_KEY"] = os.environ.get("ACTIVITY_API_KEY", "test-key")
    os.environ["ACTIVITY_API_URL"] = "https://activity.test/v1"
    os.environ["SUPABASE_URL"] = os.environ.get("SUPABASE_URL", "https://test.supabase.co")
    os.environ["SUPABASE_SERVICE_KEY"] = os.environ.get("SUPABASE_SERVICE_KEY", "test-key")
    os.environ["ENVIRONMENT"] = os.environ.get("ENVIRONMENT", "dev")

    # Clear any cached settings
    from wallet_analytics.config import get_settings

    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Provide settings instance for tests."""
    from wallet_analytics.config import get_settings

    return get_settings()


@pytest.fixture
def round_trip_trades():
    """One winning and one losing round trip."""
    return [
        {"type": "buy", "token": "BONK", "amount": 1000, "timestamp": 1000},
        {"type": "sell", "token": "BONK", "amount": 1200, "profit": 200, "timestamp": 2000},
        {"type": "buy", "token": "WIF", "amount": 2000, "timestamp": 3000},
        {"type": "sell", "token": "WIF", "amount": 1800, "profit": -200, "timestamp": 4000},
    ]
