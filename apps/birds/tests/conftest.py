import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.aviaries.models import Aviary
from apps.birds.models import Bird, HealthRecord


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='birduser@example.com',
        password='TestPass123!',
        name='Bird User',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otherbird@example.com',
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
    return Aviary.objects.create(owner=user, name='Flight', location='Garden', capacity=10)


@pytest.fixture
def make_bird(user):
    """Factory for birds of the test user."""
    def _make_bird(ring_number, **kwargs):
        kwargs.setdefault('species', 'Canary')
        kwargs.setdefault('birth_date', date(2023, 5, 1))
        kwargs.setdefault('owner', user)
        return Bird.objects.create(ring_number=ring_number, **kwargs)
    return _make_bird


@pytest.fixture
def father(make_bird):
    return make_bird('NL-2021-001', gender='male', name='Sunny')


@pytest.fixture
def mother(make_bird):
    return make_bird('NL-2021-014', gender='female')


@pytest.fixture
def chick(make_bird, father, mother):
    return make_bird('NL-2024-101', father_id=father.id, mother_id=mother.id)


@pytest.fixture
def other_bird(other_user):
    """Bird owned by another account."""
    return Bird.objects.create(
        owner=other_user,
        ring_number='XX-0001',
        species='Budgerigar',
        birth_date=date(2022, 1, 1),
    )


@pytest.fixture
def health_record(user, chick):
    return HealthRecord.objects.create(
        owner=user,
        bird_id=chick.id,
        date=date(2024, 3, 1),
        type='checkup',
        description='First checkup',
    )
