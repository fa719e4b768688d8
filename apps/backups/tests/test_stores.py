import uuid
import pytest
from unittest.mock import patch
from apps.aviaries.models import Aviary
from apps.birds.models import Bird
from apps.backups.services import (
    DatabaseCollectionStore,
    FileCollectionStore,
    CacheCollectionStore,
    get_backup_store,
    validate_records,
    BackupStoreError,
    InvalidBackupError,
)


def _aviary_record(**kwargs):
    record = {
        'id': str(uuid.uuid4()),
        'name': 'Indoor cage',
        'location': 'Shed',
        'capacity': 2,
        'description': '',
        'notes': '',
    }
    record.update(kwargs)
    return record


# =============================================================================
# Record Validation Tests
# =============================================================================

class TestValidateRecords:

    def test_valid(self):
        items = validate_records('aviaries', [_aviary_record()])

        assert items[0]['capacity'] == 2
        assert isinstance(items[0]['id'], uuid.UUID)

    def test_not_a_list(self):
        with pytest.raises(InvalidBackupError, match='must be a list'):
            validate_records('aviaries', {'id': 'x'})

    def test_invalid_record(self):
        with pytest.raises(InvalidBackupError, match="Invalid record 1 in 'aviaries'"):
            validate_records('aviaries', [_aviary_record(), _aviary_record(capacity=0)])

    def test_invalid_first_record(self):
        with pytest.raises(InvalidBackupError, match="Invalid record 0 in 'aviaries'"):
            validate_records('aviaries', [_aviary_record(capacity=0)])

    def test_duplicate_ids(self):
        record = _aviary_record()

        with pytest.raises(InvalidBackupError, match='Duplicate ids'):
            validate_records('aviaries', [record, dict(record)])

    def test_unknown_collection(self):
        with pytest.raises(InvalidBackupError):
            validate_records('parrots', [])


# =============================================================================
# Database Store Tests
# =============================================================================

@pytest.mark.django_db
class TestDatabaseCollectionStore:

    def test_load(self, user, flock):
        store = DatabaseCollectionStore()

        records = store.load(store.account_key_for(user), 'birds')

        assert [record['id'] for record in records] == [str(flock['cock'].id), str(flock['hen'].id)]
        assert records[0]['color_mutation'] == 'Opal'
        assert 'owner' not in records[0]

    def test_load_is_account_scoped(self, other_user, flock):
        store = DatabaseCollectionStore()

        assert store.load_all(store.account_key_for(other_user))['birds'] == []

    def test_save_replaces_collection(self, user, flock):
        store = DatabaseCollectionStore()
        key = store.account_key_for(user)
        kept = store.load(key, 'aviaries')[0]
        kept['name'] = 'Renamed flight'
        new = _aviary_record()

        store.save(key, 'aviaries', [kept, new])

        aviaries = Aviary.objects.filter(owner=user)
        assert {str(aviary.id) for aviary in aviaries} == {kept['id'], new['id']}
        assert Aviary.objects.get(id=kept['id']).name == 'Renamed flight'

    def test_save_keeps_created_at(self, user, flock):
        store = DatabaseCollectionStore()
        key = store.account_key_for(user)
        records = store.load(key, 'birds')

        Bird.objects.filter(owner=user).delete()
        store.save(key, 'birds', records)

        assert Bird.objects.get(id=flock['cock'].id).created_at == flock['cock'].created_at

    def test_save_rejects_other_accounts_ids(self, user, other_user, flock):
        store = DatabaseCollectionStore()
        stolen = store.load(store.account_key_for(user), 'aviaries')

        with pytest.raises(InvalidBackupError, match='belongs to another account'):
            store.save(store.account_key_for(other_user), 'aviaries', stolen)

        assert Aviary.objects.get(id=flock['aviary'].id).owner == user

    def test_invalid_records_change_nothing(self, user, flock):
        store = DatabaseCollectionStore()

        with pytest.raises(InvalidBackupError):
            store.save(store.account_key_for(user), 'aviaries', [_aviary_record(capacity='many')])

        assert Aviary.objects.filter(owner=user).count() == 1

    def test_invalid_only_record_keeps_rows(self, user, flock):
        store = DatabaseCollectionStore()

        with pytest.raises(InvalidBackupError):
            store.save(store.account_key_for(user), 'aviaries', [_aviary_record(capacity=0)])

        assert Aviary.objects.filter(owner=user).count() == 1

    def test_unknown_account(self, db):
        store = DatabaseCollectionStore()

        with pytest.raises(BackupStoreError):
            store.save('not-a-user-id', 'aviaries', [])


# =============================================================================
# File Store Tests
# =============================================================================

class TestFileCollectionStore:

    def test_missing_file_is_empty(self, file_store):
        assert file_store.load('nobody@example.com', 'birds') == []

    def test_save_and_load(self, file_store, tmp_path):
        records = [_aviary_record()]

        file_store.save('breeder@example.com', 'aviaries', records)

        assert file_store.load('breeder@example.com', 'aviaries') == records
        assert (tmp_path / 'breeder@example.com' / 'aviaries.json').exists()
        assert not (tmp_path / 'breeder@example.com' / 'aviaries.json.tmp').exists()

    def test_accounts_are_separate(self, file_store):
        file_store.save('a@example.com', 'aviaries', [_aviary_record()])

        assert file_store.load('b@example.com', 'aviaries') == []

    def test_unsafe_key_stays_inside_directory(self, file_store, tmp_path):
        file_store.save('../../etc', 'aviaries', [])

        assert list(tmp_path.iterdir()) == [tmp_path / '.._.._etc']

    def test_corrupt_file(self, file_store, tmp_path):
        folder = tmp_path / 'breeder@example.com'
        folder.mkdir()
        (folder / 'birds.json').write_text('{not json', encoding='utf-8')

        with pytest.raises(BackupStoreError):
            file_store.load('breeder@example.com', 'birds')

    def test_default_directory(self, settings, tmp_path):
        settings.BIRD_BACKUP_DIR = str(tmp_path)

        assert FileCollectionStore().directory == tmp_path

    def test_failed_save_keeps_previous_file(self, file_store, tmp_path):
        records = [_aviary_record()]
        file_store.save('breeder@example.com', 'aviaries', records)

        with pytest.raises(BackupStoreError):
            file_store.save('breeder@example.com', 'aviaries', [{'id': object()}])

        folder = tmp_path / 'breeder@example.com'
        assert file_store.load('breeder@example.com', 'aviaries') == records
        assert list(folder.glob('*.tmp')) == []

    def test_failed_replace_removes_tmp_file(self, file_store, tmp_path):
        with patch('apps.backups.services.stores.os.replace', side_effect=OSError('disk full')):
            with pytest.raises(BackupStoreError):
                file_store.save('breeder@example.com', 'aviaries', [_aviary_record()])

        folder = tmp_path / 'breeder@example.com'
        assert list(folder.iterdir()) == []

    def test_failed_save_all_keeps_previous_snapshot(self, file_store, tmp_path):
        old = {'aviaries': [_aviary_record(name='Old cage')]}
        file_store.save_all('breeder@example.com', old)

        new = {
            'aviaries': [_aviary_record(name='New cage')],
            'nests': [{'id': object()}],
        }
        with pytest.raises(BackupStoreError):
            file_store.save_all('breeder@example.com', new)

        folder = tmp_path / 'breeder@example.com'
        assert file_store.load_all('breeder@example.com') == {
            'aviaries': old['aviaries'], 'birds': [], 'health_records': [],
            'couples': [], 'nests': [], 'eggs': [],
        }
        assert list(folder.glob('*.tmp')) == []


# =============================================================================
# Cache Store Tests
# =============================================================================

class TestCacheCollectionStore:

    def test_key(self, cache_store):
        assert cache_store.key('breeder@example.com', 'nests') == 'test_backups:breeder@example.com:nests'

    def test_save_and_load(self, cache_store):
        records = [_aviary_record()]

        cache_store.save('breeder@example.com', 'aviaries', records)

        assert cache_store.load('breeder@example.com', 'aviaries') == records
        assert cache_store.load('breeder@example.com', 'birds') == []

    def test_default_prefix(self, settings):
        settings.BIRD_BACKUP_KEY_PREFIX = 'flock'

        assert CacheCollectionStore().key('x@example.com', 'eggs') == 'flock:x@example.com:eggs'


class TestGetBackupStore:

    def test_configured_store(self, settings):
        settings.BIRD_BACKUP_STORE = 'apps.backups.services.stores.CacheCollectionStore'

        assert isinstance(get_backup_store(), CacheCollectionStore)
