"""
Birds services - Business logic layer.

- Bird CRUD operations and aviary assignment
- Search and breeding candidate filters
- Ring number conflict detection
- Health records
"""

from .exceptions import (
    BirdsServiceError,
    BirdNotFoundError,
    InvalidBirdError,
    HealthRecordNotFoundError,
)
from .bird_management import (
    create_bird,
    update_bird,
    delete_bird,
    get_bird_by_id,
    get_birds,
    get_birds_by_aviary,
)
from .bird_search import (
    search_birds,
    get_breeding_candidates,
    get_all_species,
)
from .ring_numbers import (
    normalize_ring_number,
    find_ring_number_conflicts,
    EXACT_MATCH_THRESHOLD,
    SIMILARITY_THRESHOLD,
)
from .health_records import (
    create_health_record,
    update_health_record,
    delete_health_record,
    get_health_record_by_id,
    get_health_records,
    get_health_records_by_bird,
)

__all__ = [
    # Exceptions
    'BirdsServiceError',
    'BirdNotFoundError',
    'InvalidBirdError',
    'HealthRecordNotFoundError',
    # Bird Management
    'create_bird',
    'update_bird',
    'delete_bird',
    'get_bird_by_id',
    'get_birds',
    'get_birds_by_aviary',
    # Search
    'search_birds',
    'get_breeding_candidates',
    'get_all_species',
    # Ring Numbers
    'normalize_ring_number',
    'find_ring_number_conflicts',
    'EXACT_MATCH_THRESHOLD',
    'SIMILARITY_THRESHOLD',
    # Health Records
    'create_health_record',
    'update_health_record',
    'delete_health_record',
    'get_health_record_by_id',
    'get_health_records',
    'get_health_records_by_bird',
]
