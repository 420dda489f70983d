"""
Root conftest.py for all backend tests.

This file makes fixtures available to all test files across all apps.
"""
import pytest
from django.conf import settings

# Import all shared fixtures
from core_backend.tests.fixtures import *  # noqa: F401,F403


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================

@pytest.fixture
def api_client():
    """
    Provide DRF API client for API tests (no caller identity).

    Usage:
        def test_requires_identity(api_client):
            response = api_client.get('/api/notifications/')
            assert response.status_code == 401
    """
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def client_for():
    """
    Factory for API clients acting as a given uid.

    The uid is sent in the identity header, as the upstream gateway does.

    Usage:
        def test_my_orders(client_for):
            response = client_for('client-1').get('/api/orders/')
            assert response.status_code == 200
    """
    from rest_framework.test import APIClient

    header = 'HTTP_' + getattr(settings, 'IDENTITY_HEADER', 'X-User-Id').upper().replace('-', '_')

    def make(uid):
        client = APIClient()
        client.credentials(**{header: uid})
        return client

    return make
