# =============================================================================
# tests/conftest.py - Shared Fixtures
# =============================================================================
# Test environment variables and fixtures shared by every test module.
# =============================================================================

import os

# =============================================================================
# Environment (must precede any app import)
# =============================================================================
# app.config builds its settings at import time

os.environ.setdefault("PORTAL_JWT_SECRET", "test-portal-secret-0123456789abcdef")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """HTTP client bound to the FastAPI app (no network)."""
    from app.main import app
    return TestClient(app)


@pytest.fixture
def subscriber_id():
    """A well-formed subscriber UUID."""
    return "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def sample_payment_dict(subscriber_id):
    """Minimal valid payment form payload."""
    return {
        "subscriberId": subscriber_id,
        "amount": "499.00",
        "method": "UPI",
    }


@pytest.fixture
def sample_gateway_dict():
    """Valid payment gateway form payload."""
    return {
        "provider": "RAZORPAY",
        "name": "Razorpay Live",
        "apiKey": "rzp_live_key",
        "apiSecret": "rzp_live_secret",
    }


@pytest.fixture
def sample_session():
    """Portal session claims for a signed-in subscriber."""
    from app.auth import PortalSession
    return PortalSession(
        subscriber_id="550e8400-e29b-41d4-a716-446655440000",
        tenant_id="6ba7b810-9dad-11d1-80b4-00c04fd430c8",
        tenant_slug="acme-isp",
        username="jdoe",
        name="John Doe",
    )


@pytest.fixture
def sample_location_rows():
    """Flat location rows as loaded from the database."""
    return [
        {"id": "area-1", "name": "Koramangala", "type": "AREA", "parentId": "city-1"},
        {"id": "city-1", "name": "Bengaluru", "type": "CITY", "parentId": "region-1"},
        {"id": "region-1", "name": "Karnataka", "type": "REGION", "parentId": None},
        {"id": "area-2", "name": "Indiranagar", "type": "AREA", "parentId": "city-1"},
        {"id": "orphan", "name": "Whitefield", "type": "AREA", "parentId": "deleted-city"},
    ]
