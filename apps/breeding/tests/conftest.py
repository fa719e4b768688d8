import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.birds.models import Bird
from apps.breeding.models import Couple, Nest, Egg


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='breeder@example.com',
        password='TestPass123!',
        name='Breeder',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otherbreeder@example.com',
        password='TestPass123!',
        name='Other Breeder',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def male(user):
    return Bird.objects.create(
        owner=user,
        ring_number='NL-2021-001',
        species='Gouldian finch',
        gender='male',
        birth_date=date(2021, 4, 1),
    )


@pytest.fixture
def female(user):
    return Bird.objects.create(
        owner=user,
        ring_number='NL-2021-014',
        species='Zebra finch',
        gender='female',
        birth_date=date(2021, 5, 3),
    )


@pytest.fixture
def couple(user, male, female):
    return Couple.objects.create(owner=user, male_id=male.id, female_id=female.id, season='2025')


@pytest.fixture
def nest(user, couple):
    """Active nest with four laid eggs."""
    nest = Nest.objects.create(
        owner=user,
        couple_id=couple.id,
        start_date=date(2025, 3, 1),
        egg_count=4,
        notes='First round',
    )
    for day in range(2, 6):
        Egg.objects.create(owner=user, nest_id=nest.id, lay_date=date(2025, 3, day))
    return nest


@pytest.fixture
def make_nest(user, couple):
    """Factory for nests of the test couple."""
    def _make_nest(**kwargs):
        kwargs.setdefault('owner', user)
        kwargs.setdefault('couple_id', couple.id)
        kwargs.setdefault('start_date', date(2025, 3, 1))
        return Nest.objects.create(**kwargs)
    return _make_nest
