import uuid
import pytest
from datetime import date
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.aviaries.models import Aviary
from apps.birds.models import Bird
from apps.breeding.models import Couple, Nest, Egg


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def analytics_user(db):
    return User.objects.create_user(
        email='analytics@example.com',
        password='TestPass123!',
        name='Analytics User',
    )


@pytest.fixture
def analytics_other_user(db):
    return User.objects.create_user(
        email='analytics-other@example.com',
        password='TestPass123!',
        name='Other Analytics User',
    )


@pytest.fixture
def analytics_user_client(api_client, analytics_user):
    """Authenticated client for analytics_user."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def analytics_flock(analytics_user, analytics_other_user):
    """
    A small flock for analytics_user:

    - 1 aviary
    - 3 canaries (male, female, deceased unknown) and 1 zebra finch
    - couple 2024 (inactive) with a hatched nest: 3 eggs, 2 hatched
    - couple 2025 (active) with an active nest: 1 laid egg
    - a nest whose couple no longer exists

    analytics_other_user owns one bird that must never be counted.
    """
    owner = analytics_user

    Aviary.objects.create(owner=owner, name='Flight', location='Garden', capacity=6)

    male = Bird.objects.create(
        owner=owner, ring_number='C-1', species='Canary', gender='male', birth_date=date(2022, 1, 1)
    )
    female = Bird.objects.create(
        owner=owner, ring_number='C-2', species='Canary', gender='female', birth_date=date(2022, 2, 1)
    )
    Bird.objects.create(
        owner=owner, ring_number='C-3', species='Canary', status='deceased', birth_date=date(2019, 1, 1)
    )
    Bird.objects.create(
        owner=owner, ring_number='Z-1', species='Zebra finch', gender='female', birth_date=date(2023, 1, 1)
    )
    Bird.objects.create(
        owner=analytics_other_user, ring_number='X-1', species='Canary', birth_date=date(2023, 1, 1)
    )

    old_couple = Couple.objects.create(
        owner=owner, male_id=male.id, female_id=female.id, season='2024', active=False
    )
    new_couple = Couple.objects.create(
        owner=owner, male_id=male.id, female_id=female.id, season='2025'
    )

    old_nest = Nest.objects.create(
        owner=owner, couple_id=old_couple.id, start_date=date(2024, 4, 1),
        active=False, egg_count=3, hatched_count=2,
    )
    Egg.objects.create(owner=owner, nest_id=old_nest.id, lay_date=date(2024, 4, 2), status='hatched')
    Egg.objects.create(owner=owner, nest_id=old_nest.id, lay_date=date(2024, 4, 3), status='hatched')
    Egg.objects.create(owner=owner, nest_id=old_nest.id, lay_date=date(2024, 4, 4), status='infertile')

    new_nest = Nest.objects.create(owner=owner, couple_id=new_couple.id, start_date=date(2025, 4, 1))
    Egg.objects.create(owner=owner, nest_id=new_nest.id, lay_date=date(2025, 4, 2))

    Nest.objects.create(owner=owner, couple_id=uuid.uuid4(), start_date=date(2025, 5, 1))

    return owner
