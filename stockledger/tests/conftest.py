"""
Pytest fixtures for Stockledger tests.
"""

import uuid
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model

from stockledger.adapters import reset_component_store
from stockledger.models import Component


User = get_user_model()


@pytest.fixture(autouse=True)
def _fresh_component_store():
    """Tests may override STOCKLEDGER settings; drop the cached store around each."""
    reset_component_store()
    yield
    reset_component_store()


@pytest.fixture
def team_id():
    """Tenant owning the test components."""
    return uuid.UUID('11111111-1111-4111-8111-111111111111')


@pytest.fixture
def other_team_id():
    """A second tenant that must never see the first one's stock."""
    return uuid.UUID('22222222-2222-4222-8222-222222222222')


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username='storekeeper',
        password='testpass123'
    )


@pytest.fixture
def make_component(db, team_id):
    """Factory for components, created the way an outside collaborator would."""
    def _make(quantity='0', team=None, **fields):
        fields.setdefault('name', 'M3 hex bolt')
        return Component.objects.create(
            team_id=team or team_id,
            quantity=Decimal(quantity),
            **fields
        )
    return _make


@pytest.fixture
def component(make_component):
    """Component starting at quantity 100."""
    return make_component('100', sku='BOLT-M3', unit='pcs')


@pytest.fixture
def empty_component(make_component):
    """Component with no stock."""
    return make_component('0', name='Washer M3', sku='WASH-M3')
