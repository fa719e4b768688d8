"""
Collection stores.

A collection store loads and saves whole collections of backup records
(plain dicts, see serializers.py) for one account. Three stores exist:

    DatabaseCollectionStore - the live tables of the app
    FileCollectionStore     - one JSON document per account and collection
    CacheCollectionStore    - the Django cache as a key-value store

The store used for snapshots is set with BIRD_BACKUP_STORE.
"""

import json
import logging
import os
import re
from pathlib import Path

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.cache import caches
from django.db import transaction
from django.utils.module_loading import import_string

from apps.accounts.models import User
from ..serializers import RECORD_SERIALIZERS, COLLECTIONS
from .exceptions import BackupStoreError, InvalidBackupError

logger = logging.getLogger(__name__)


def _check_collection(collection):
    if collection not in RECORD_SERIALIZERS:
        raise InvalidBackupError(f"Unknown collection '{collection}'")


def validate_records(collection, records):
    """
    Validate backup records of one collection.

    Returns:
        List of validated data dicts (model field values)

    Raises:
        InvalidBackupError: If the records are not a list of valid records
            or an id appears twice
    """
    _check_collection(collection)
    if not isinstance(records, list):
        raise InvalidBackupError(f"'{collection}' must be a list of records")

    serializer = RECORD_SERIALIZERS[collection](data=records, many=True)
    if not serializer.is_valid():
        errors = serializer.errors
        # A list, or a dict keyed by record index on newer DRF releases
        items = errors.items() if isinstance(errors, dict) else enumerate(errors)
        for index, record_errors in items:
            if record_errors:
                raise InvalidBackupError(f"Invalid record {index} in '{collection}': {record_errors}")
        raise InvalidBackupError(f"Invalid records in '{collection}': {errors}")

    ids = [item['id'] for item in serializer.validated_data]
    if len(ids) != len(set(ids)):
        raise InvalidBackupError(f"Duplicate ids in '{collection}'")

    return serializer.validated_data


class CollectionStore:
    """Load and save collections of backup records, keyed by account."""

    def account_key_for(self, user):
        """Key under which the user's collections are stored."""
        return user.email

    def load(self, account_key, collection):
        """Return the stored records, or an empty list if nothing is stored."""
        raise NotImplementedError

    def save(self, account_key, collection, records):
        """Replace the stored collection with records."""
        raise NotImplementedError

    def load_all(self, account_key):
        return {collection: self.load(account_key, collection) for collection in COLLECTIONS}

    def save_all(self, account_key, data):
        for collection in COLLECTIONS:
            self.save(account_key, collection, data.get(collection, []))


class DatabaseCollectionStore(CollectionStore):
    """The app's own tables, keyed by user id."""

    def account_key_for(self, user):
        return str(user.id)

    def _owner(self, account_key):
        try:
            return User.objects.get(id=account_key)
        except (User.DoesNotExist, ValidationError, ValueError):
            raise BackupStoreError(f"No account with id {account_key}")

    def load(self, account_key, collection):
        _check_collection(collection)
        serializer_class = RECORD_SERIALIZERS[collection]
        model = serializer_class.Meta.model

        rows = model.objects.filter(owner_id=account_key)
        return [dict(record) for record in serializer_class(rows, many=True).data]

    @transaction.atomic
    def save(self, account_key, collection, records):
        """
        Upsert the given records and delete the account's other rows of the
        collection, in one transaction.

        Raises:
            InvalidBackupError: If a record fails validation or its id is
                used by another account
        """
        items = validate_records(collection, records)
        owner = self._owner(account_key)
        model = RECORD_SERIALIZERS[collection].Meta.model

        ids = [item['id'] for item in items]
        foreign = model.objects.filter(id__in=ids).exclude(owner=owner)
        if foreign.exists():
            raise InvalidBackupError(
                f"Record {foreign.first().id} in '{collection}' belongs to another account"
            )

        model.objects.filter(owner=owner).exclude(id__in=ids).delete()

        for item in items:
            defaults = dict(item)
            record_id = defaults.pop('id')
            model.objects.update_or_create(id=record_id, owner=owner, defaults=defaults)


class FileCollectionStore(CollectionStore):
    """One JSON document per account and collection under BIRD_BACKUP_DIR."""

    def __init__(self, directory=None):
        self.directory = Path(directory or settings.BIRD_BACKUP_DIR)

    def _path(self, account_key, collection):
        _check_collection(collection)
        folder = re.sub(r'[^A-Za-z0-9@._-]', '_', account_key)
        return self.directory / folder / f"{collection}.json"

    def load(self, account_key, collection):
        path = self._path(account_key, collection)
        if not path.exists():
            return []

        try:
            with open(path, encoding='utf-8') as fh:
                return json.load(fh)
        except (OSError, ValueError) as e:
            logger.error("Could not read %s: %s", path, e)
            raise BackupStoreError(f"Could not read stored '{collection}'")

    def _write_tmp(self, path, collection, records):
        tmp_path = path.with_suffix('.json.tmp')
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as fh:
                json.dump(records, fh, ensure_ascii=False, indent=2)
        except (OSError, TypeError) as e:
            logger.error("Could not write %s: %s", tmp_path, e)
            self._discard([tmp_path])
            raise BackupStoreError(f"Could not save '{collection}'")
        return tmp_path

    def _discard(self, tmp_paths):
        for tmp_path in tmp_paths:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove %s: %s", tmp_path, e)

    def _commit(self, staged):
        """Move staged (tmp_path, path, collection) entries into place."""
        for index, (tmp_path, path, collection) in enumerate(staged):
            try:
                os.replace(tmp_path, path)
            except OSError as e:
                logger.error("Could not replace %s: %s", path, e)
                self._discard([entry[0] for entry in staged[index:]])
                raise BackupStoreError(f"Could not save '{collection}'")

    def save(self, account_key, collection, records):
        path = self._path(account_key, collection)
        tmp_path = self._write_tmp(path, collection, records)
        self._commit([(tmp_path, path, collection)])

    def save_all(self, account_key, data):
        """
        Write every collection to a temporary file first and move them into
        place only once all of them are written, so a failed write leaves the
        previous snapshot untouched.
        """
        paths = [(self._path(account_key, collection), collection) for collection in COLLECTIONS]
        staged = []
        try:
            for path, collection in paths:
                tmp_path = self._write_tmp(path, collection, data.get(collection, []))
                staged.append((tmp_path, path, collection))
        except BackupStoreError:
            self._discard([entry[0] for entry in staged])
            raise
        self._commit(staged)


class CacheCollectionStore(CollectionStore):
    """
    Django cache as key-value storage.

    Keys look like '<BIRD_BACKUP_KEY_PREFIX>:<email>:<collection>'. Entries
    never expire; with a volatile cache backend they live as long as the
    cache does.
    """

    def __init__(self, alias='default', prefix=None):
        self.cache = caches[alias]
        self.prefix = prefix or settings.BIRD_BACKUP_KEY_PREFIX

    def key(self, account_key, collection):
        _check_collection(collection)
        return f"{self.prefix}:{account_key}:{collection}"

    def load(self, account_key, collection):
        return self.cache.get(self.key(account_key, collection), [])

    def save(self, account_key, collection, records):
        self.cache.set(self.key(account_key, collection), records, timeout=None)


def get_backup_store():
    """Instantiate the store configured in BIRD_BACKUP_STORE."""
    return import_string(settings.BIRD_BACKUP_STORE)()
