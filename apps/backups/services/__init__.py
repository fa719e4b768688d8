"""
Backups services - Business logic layer.

- Collection stores (database, JSON files, cache)
- Export as text report or JSON
- Import of an export
- Snapshot to and restore from the configured backup store
"""

from .exceptions import (
    BackupsServiceError,
    BackupStoreError,
    InvalidBackupError,
    UnsupportedFormatError,
    NoBackupFoundError,
)
from .stores import (
    CollectionStore,
    DatabaseCollectionStore,
    FileCollectionStore,
    CacheCollectionStore,
    get_backup_store,
    validate_records,
)
from .export import (
    render_text,
    render_json,
    parse_export,
)
from .account_data import (
    build_export_document,
    export_account_data,
    import_account_data,
    snapshot_account,
    restore_account,
    EXPORT_FORMATS,
)

__all__ = [
    # Exceptions
    'BackupsServiceError',
    'BackupStoreError',
    'InvalidBackupError',
    'UnsupportedFormatError',
    'NoBackupFoundError',
    # Stores
    'CollectionStore',
    'DatabaseCollectionStore',
    'FileCollectionStore',
    'CacheCollectionStore',
    'get_backup_store',
    'validate_records',
    # Export
    'render_text',
    'render_json',
    'parse_export',
    # Account data
    'build_export_document',
    'export_account_data',
    'import_account_data',
    'snapshot_account',
    'restore_account',
    'EXPORT_FORMATS',
]
