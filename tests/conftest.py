# This project was developed with assistance from AI tools.
"""Shared fixtures: the real app and a TestClient bound to it."""

import pytest
from fastapi.testclient import TestClient

from mortgage_api.main import app as real_app


@pytest.fixture(autouse=True)
def _clean_overrides():
    """Clear app dependency overrides after each test."""
    yield
    real_app.dependency_overrides.clear()


@pytest.fixture
def app():
    return real_app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def loan_body():
    """Request body for the reference quote (100k price, 5% down, 4.29%, 5 years)."""
    return {
        "propertyPrice": 100000,
        "downPayment": 5000,
        "annualInterestRate": 4.29,
        "amortizationPeriod": 5,
        "schedule": "MONTHLY",
    }
