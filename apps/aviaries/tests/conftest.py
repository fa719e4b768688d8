import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.aviaries.models import Aviary
from apps.birds.models import Bird


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='aviaryuser@example.com',
        password='TestPass123!',
        name='Aviary User',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otheraviary@example.com',
        password='TestPass123!',
        name='Other User',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def aviary(user):
    """Create and return a small aviary."""
    return Aviary.objects.create(
        owner=user,
        name='Garden flight',
        location='Back garden',
        capacity=2,
        notes='South facing',
    )


@pytest.fixture
def other_aviary(other_user):
    """Aviary owned by another account."""
    return Aviary.objects.create(
        owner=other_user,
        name='Somebody else',
        location='Elsewhere',
        capacity=5,
    )


@pytest.fixture
def make_bird(user):
    """Factory for birds of the test user."""
    def _make_bird(ring_number, **kwargs):
        kwargs.setdefault('species', 'Canary')
        kwargs.setdefault('birth_date', date(2023, 5, 1))
        kwargs.setdefault('owner', user)
        return Bird.objects.create(ring_number=ring_number, **kwargs)
    return _make_bird
