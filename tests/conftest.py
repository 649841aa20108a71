"""
Shared test fixtures.

The service keeps no state between requests, so a single
test client over the real app is all the API tests need.
"""

import pytest
from fastapi.testclient import TestClient

from financial_statements.main import app


@pytest.fixture
def client():
    """Provide a test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def sample_entries():
    """One entry for every category."""
    return [
        {"category": "asset", "amount": 1000},
        {"category": "liability", "amount": 400},
        {"category": "equity", "amount": 250},
        {"category": "revenue", "amount": 800},
        {"category": "expense", "amount": 350},
        {"category": "contribution", "amount": 500},
        {"category": "withdrawal", "amount": 120},
        {"category": "retainedEarnings", "amount": 450},
        {"category": "operating", "amount": 600},
        {"category": "investing", "amount": -300},
        {"category": "financing", "amount": 75},
    ]
