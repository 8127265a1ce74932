"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_expenses() -> list[dict[str, Any]]:
    """Stored expenses as the ingestion path writes them (smallest units)."""
    return [
        {
            "amount": 4599,  # $45.99
            "currency": "USD",
            "categories": ["Food"],
            "expense_date": "2024-08-15",
            "merchant": "Corner Market",
        },
        {
            "amount": 1000,  # $10.00 split across two categories
            "currency": "USD",
            "categories": ["Food", "Travel"],
            "expense_date": "2024-08-20",
            "merchant": "Airport Cafe",
        },
        {
            "amount": 1001,  # $10.01 split three ways
            "currency": "USD",
            "categories": ["Travel", "Gifts", "Food"],
            "expense_date": "2024-09-01",
            "merchant": "Duty Free",
        },
        {
            "amount": 3000,  # 30.00 EUR, stored base amount $32.50
            "currency": "EUR",
            "base_amount": 3250,
            "base_currency": "USD",
            "categories": [],
            "expense_date": "2024-09-03",
            "merchant": "Bahnhof Kiosk",
        },
        {
            "amount": 5000,  # 5000 JPY, no base amount
            "currency": "JPY",
            "categories": ["Food"],
            "expense_date": "2024-09-10",
            "merchant": "Ramen Stand",
        },
    ]


@pytest.fixture
def rates_payload() -> dict[str, Any]:
    """Exchange rate snapshot in rate-API shape (1 USD = X)."""
    return {
        "base": "USD",
        "rates": {"EUR": 0.92, "JPY": 150, "KWD": "0.307"},
        "fetched_at": "2024-08-15T12:00:00+00:00",
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    # Ensure tests don't use real data
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATA_DIR", str(Path(tempfile.gettempdir()) / "test_expenses_data"))
    monkeypatch.delenv("EXPENSES_DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("EXPENSES_LOCALE", raising=False)
    monkeypatch.delenv("EXPENSES_RATES_FILE", raising=False)
    monkeypatch.delenv("EXPENSES_RATES_TTL_HOURS", raising=False)
    # Drop the cached config so each test sees its own environment
    monkeypatch.setattr("expenses.core.config._config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "allocation: Tests for lossless allocation")
    config.addinivalue_line("markers", "analysis: Tests for breakdowns and analytics")
