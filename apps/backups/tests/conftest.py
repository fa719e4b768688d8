import pytest
from datetime import date
from django.core.cache import caches
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.aviaries.models import Aviary
from apps.birds.models import Bird, HealthRecord
from apps.breeding.models import Couple, Nest, Egg
from apps.backups.services import FileCollectionStore, CacheCollectionStore


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='backup@example.com',
        password='TestPass123!',
        name='Backup Breeder',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='otherbackup@example.com',
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
def flock(user):
    """One record in every collection, plus a second bird."""
    aviary = Aviary.objects.create(owner=user, name='Flight', location='Garden', capacity=4)
    cock = Bird.objects.create(
        owner=user,
        ring_number='NL-2022-007',
        name='Pepper',
        species='Canary',
        color_mutation='Opal',
        gender='male',
        birth_date=date(2022, 3, 14),
        aviary_id=aviary.id,
    )
    hen = Bird.objects.create(
        owner=user,
        ring_number='NL-2022-019',
        species='Canary',
        gender='female',
        birth_date=date(2022, 4, 2),
        aviary_id=aviary.id,
    )
    HealthRecord.objects.create(
        owner=user, bird_id=cock.id, date=date(2024, 1, 10), description='Annual checkup'
    )
    couple = Couple.objects.create(owner=user, male_id=cock.id, female_id=hen.id, season='2024')
    nest = Nest.objects.create(owner=user, couple_id=couple.id, start_date=date(2024, 4, 1), egg_count=1)
    Egg.objects.create(owner=user, nest_id=nest.id, lay_date=date(2024, 4, 3))
    return {
        'aviary': aviary,
        'cock': cock,
        'hen': hen,
        'couple': couple,
        'nest': nest,
    }


@pytest.fixture
def file_store(tmp_path):
    return FileCollectionStore(directory=tmp_path)


@pytest.fixture
def cache_store():
    caches['default'].clear()
    yield CacheCollectionStore(prefix='test_backups')
    caches['default'].clear()


@pytest.fixture
def backup_dir(settings, tmp_path):
    """Point the default file store at a temporary directory."""
    settings.BIRD_BACKUP_STORE = 'apps.backups.services.stores.FileCollectionStore'
    settings.BIRD_BACKUP_DIR = str(tmp_path)
    return tmp_path
