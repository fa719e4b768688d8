import json
import pytest
from apps.aviaries.models import Aviary
from apps.birds.models import Bird, HealthRecord
from apps.breeding.models import Couple, Nest, Egg
from apps.backups.services import (
    build_export_document,
    export_account_data,
    import_account_data,
    snapshot_account,
    restore_account,
    parse_export,
    InvalidBackupError,
    UnsupportedFormatError,
    NoBackupFoundError,
)
from apps.backups.services.export import JSON_BEGIN, JSON_END


# =============================================================================
# Export Tests
# =============================================================================

@pytest.mark.django_db
class TestExport:

    def test_document(self, user, flock):
        document = build_export_document(user=user)

        assert document['format_version'] == 1
        assert document['account'] == {'email': 'backup@example.com', 'name': 'Backup Breeder'}
        assert document['statistics']['total_birds'] == 2
        assert len(document['birds']) == 2
        assert len(document['health_records']) == 1
        assert len(document['eggs']) == 1

    def test_json(self, user, flock):
        document = json.loads(export_account_data(user=user, fmt='json'))

        assert [bird['ring_number'] for bird in document['birds']] == ['NL-2022-007', 'NL-2022-019']
        assert document['couples'][0]['season'] == '2024'

    def test_text_report(self, user, flock):
        text = export_account_data(user=user)

        assert text.startswith('AVIARY KEEPER EXPORT')
        assert 'Account: backup@example.com (Backup Breeder)' in text
        assert 'Total birds: 2' in text
        assert 'BIRDS (2)' in text
        assert 'HEALTH RECORDS (1)' in text
        assert f"  * {flock['cock'].id}" in text
        assert 'color_mutation: Opal' in text
        assert 'description: Annual checkup' in text
        assert 'season: 2024' in text
        assert 'active: yes' in text

    def test_text_report_embeds_document(self, user, flock):
        text = export_account_data(user=user, fmt='text')

        assert JSON_BEGIN in text and JSON_END in text
        document = parse_export(text)
        assert document['nests'][0]['id'] == str(flock['nest'].id)

    def test_empty_account(self, other_user):
        text = export_account_data(user=other_user)

        assert 'AVIARIES (0)' in text
        assert '  none' in text

    def test_unsupported_format(self, user):
        with pytest.raises(UnsupportedFormatError):
            export_account_data(user=user, fmt='xml')


class TestParseExport:

    def test_dict_passes_through(self):
        assert parse_export({'birds': []}) == {'birds': []}

    def test_json_text(self):
        assert parse_export('{"birds": []}') == {'birds': []}

    @pytest.mark.parametrize('payload', ['', '   ', 'no json here', '[1, 2]', None])
    def test_invalid(self, payload):
        with pytest.raises(InvalidBackupError):
            parse_export(payload)

    @pytest.mark.django_db
    def test_markers_inside_record_fields(self, user, flock):
        notes = f"{JSON_END}\n{JSON_BEGIN}\n{JSON_END} copied from an old report"
        Bird.objects.filter(id=flock['cock'].id).update(notes=notes)

        document = parse_export(export_account_data(user=user))

        cock = next(bird for bird in document['birds'] if bird['id'] == str(flock['cock'].id))
        assert cock['notes'] == notes
        assert len(document['birds']) == 2

    def test_unterminated_block(self):
        with pytest.raises(InvalidBackupError):
            parse_export(f'report\n{JSON_BEGIN}\n{{"birds": []}}\n')


# =============================================================================
# Import Tests
# =============================================================================

@pytest.mark.django_db
class TestImport:

    def test_import_text_report_restores_records(self, user, flock):
        text = export_account_data(user=user)
        Bird.objects.filter(owner=user).delete()
        Egg.objects.filter(owner=user).delete()

        counts = import_account_data(user=user, payload=text)

        assert counts == {
            'aviaries': 1, 'birds': 2, 'health_records': 1,
            'couples': 1, 'nests': 1, 'eggs': 1,
        }
        cock = Bird.objects.get(id=flock['cock'].id)
        assert cock.owner == user
        assert cock.aviary_id == flock['aviary'].id
        assert Egg.objects.filter(owner=user, nest_id=flock['nest'].id).count() == 1

    def test_import_replaces_existing_data(self, user, flock):
        document = json.loads(export_account_data(user=user, fmt='json'))
        Aviary.objects.create(owner=user, name='Extra', capacity=1)

        import_account_data(user=user, payload=document)

        assert Aviary.objects.filter(owner=user).count() == 1

    def test_missing_collections_are_emptied(self, user, flock):
        document = build_export_document(user=user)
        del document['eggs']
        del document['health_records']

        counts = import_account_data(user=user, payload=document)

        assert counts['eggs'] == 0
        assert not Egg.objects.filter(owner=user).exists()
        assert not HealthRecord.objects.filter(owner=user).exists()
        assert Nest.objects.filter(owner=user).count() == 1

    def test_invalid_record_changes_nothing(self, user, flock):
        document = build_export_document(user=user)
        document['eggs'] = []
        document['couples'][0]['male_id'] = 'not-a-uuid'

        with pytest.raises(InvalidBackupError):
            import_account_data(user=user, payload=document)

        assert Egg.objects.filter(owner=user).count() == 1
        assert Couple.objects.get(id=flock['couple'].id).male_id == flock['cock'].id

    def test_import_into_other_account(self, user, other_user, flock):
        document = build_export_document(user=user)

        with pytest.raises(InvalidBackupError):
            import_account_data(user=other_user, payload=document)

        assert not Bird.objects.filter(owner=other_user).exists()
        assert Bird.objects.filter(owner=user).count() == 2


# =============================================================================
# Snapshot / Restore Tests
# =============================================================================

@pytest.mark.django_db
class TestSnapshotRestore:

    def test_snapshot_writes_every_collection(self, user, flock, file_store, tmp_path):
        counts = snapshot_account(user=user, store=file_store)

        assert counts['birds'] == 2
        folder = tmp_path / 'backup@example.com'
        assert sorted(path.name for path in folder.iterdir()) == [
            'aviaries.json', 'birds.json', 'couples.json',
            'eggs.json', 'health_records.json', 'nests.json',
        ]

    def test_restore_file_store(self, user, flock, file_store):
        snapshot_account(user=user, store=file_store)
        Bird.objects.filter(id=flock['hen'].id).delete()
        Bird.objects.filter(id=flock['cock'].id).update(name='Changed')

        counts = restore_account(user=user, store=file_store)

        assert counts['birds'] == 2
        assert Bird.objects.get(id=flock['cock'].id).name == 'Pepper'
        assert Bird.objects.filter(id=flock['hen'].id).exists()

    def test_restore_cache_store(self, user, flock, cache_store):
        snapshot_account(user=user, store=cache_store)
        Couple.objects.filter(owner=user).delete()

        restore_account(user=user, store=cache_store)

        assert Couple.objects.filter(owner=user).count() == 1

    def test_restore_without_backup(self, user, flock, file_store):
        with pytest.raises(NoBackupFoundError):
            restore_account(user=user, store=file_store)

        assert Bird.objects.filter(owner=user).count() == 2

    def test_backups_are_per_account(self, user, other_user, flock, file_store):
        snapshot_account(user=user, store=file_store)

        with pytest.raises(NoBackupFoundError):
            restore_account(user=other_user, store=file_store)

    def test_corrupt_backup_changes_nothing(self, user, flock, file_store):
        snapshot_account(user=user, store=file_store)
        file_store.save('backup@example.com', 'birds', [{'id': 'broken'}])

        with pytest.raises(InvalidBackupError):
            restore_account(user=user, store=file_store)

        assert Bird.objects.filter(owner=user).count() == 2
