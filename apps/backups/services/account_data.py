"""Export, import, snapshot and restore of a whole account."""

import logging
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.analytics.analytics import AnalyticsQueries
from ..serializers import COLLECTIONS
from .exceptions import UnsupportedFormatError, NoBackupFoundError
from .export import render_text, render_json, parse_export, FORMAT_VERSION
from .stores import DatabaseCollectionStore, get_backup_store, validate_records

logger = logging.getLogger(__name__)


EXPORT_FORMATS = ('text', 'json')


def _counts(data):
    return {collection: len(data.get(collection, [])) for collection in COLLECTIONS}


def build_export_document(*, user: User) -> dict:
    """All collections of the account plus the current statistics."""
    live = DatabaseCollectionStore()
    document = {
        'format_version': FORMAT_VERSION,
        'exported_at': timezone.now().isoformat(),
        'account': {'email': user.email, 'name': user.name},
        'statistics': AnalyticsQueries.statistics(owner_id=user.id),
    }
    document.update(live.load_all(live.account_key_for(user)))
    return document


def export_account_data(*, user: User, fmt: str = 'text') -> str:
    """
    Render the account's data.

    Args:
        user: Account to export
        fmt: 'text' (report with embedded JSON block) or 'json'

    Raises:
        UnsupportedFormatError: If fmt is not 'text' or 'json'
    """
    if fmt not in EXPORT_FORMATS:
        raise UnsupportedFormatError(
            f"Unknown export format '{fmt}'. Valid options: {', '.join(EXPORT_FORMATS)}"
        )

    document = build_export_document(user=user)
    logger.info("Exporting data of %s as %s", user.email, fmt)

    if fmt == 'json':
        return render_json(document)
    return render_text(document)


def _replace_live_data(user, data):
    for collection in COLLECTIONS:
        validate_records(collection, data.get(collection, []))

    live = DatabaseCollectionStore()
    with transaction.atomic():
        live.save_all(live.account_key_for(user), data)


def import_account_data(*, user: User, payload) -> dict:
    """
    Replace all of the account's records with those of an export.

    Collections missing from the payload are emptied. Everything is
    validated before anything is written, and written in one transaction.

    Args:
        user: Account to import into
        payload: Export document (dict), its JSON text or a text report

    Returns:
        Number of records per collection after the import

    Raises:
        InvalidBackupError: If the payload or any record is invalid
    """
    document = parse_export(payload)
    data = {collection: document.get(collection, []) for collection in COLLECTIONS}

    _replace_live_data(user, data)

    counts = _counts(data)
    logger.info("Imported data for %s: %s", user.email, counts)
    return counts


def snapshot_account(*, user: User, store=None) -> dict:
    """
    Copy the account's live records to the backup store.

    Returns:
        Number of records per collection written
    """
    store = store or get_backup_store()
    live = DatabaseCollectionStore()

    data = live.load_all(live.account_key_for(user))
    store.save_all(store.account_key_for(user), data)

    counts = _counts(data)
    logger.info("Snapshot of %s saved to %s: %s", user.email, type(store).__name__, counts)
    return counts


def restore_account(*, user: User, store=None) -> dict:
    """
    Replace the account's live records with the backup store's copy.

    Raises:
        NoBackupFoundError: If the store holds nothing for this account
        InvalidBackupError: If a stored record is invalid
    """
    store = store or get_backup_store()
    data = store.load_all(store.account_key_for(user))

    if not any(data.values()):
        raise NoBackupFoundError(f"No backup found for {user.email}")

    _replace_live_data(user, data)

    counts = _counts(data)
    logger.info("Restored %s from %s: %s", user.email, type(store).__name__, counts)
    return counts
