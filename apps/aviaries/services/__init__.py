"""
Aviaries services - Business logic layer.

- Aviary CRUD operations
- Occupancy (birds assigned vs. advisory capacity)
"""

from .aviary_management import (
    create_aviary,
    update_aviary,
    delete_aviary,
    get_aviary_by_id,
    get_aviaries,
)
from .occupancy import get_aviary_occupancy

from .exceptions import (
    AviariesServiceError,
    AviaryNotFoundError,
    InvalidAviaryError,
)

__all__ = [
    'create_aviary',
    'update_aviary',
    'delete_aviary',
    'get_aviary_by_id',
    'get_aviaries',
    'get_aviary_occupancy',
    'AviariesServiceError',
    'AviaryNotFoundError',
    'InvalidAviaryError',
]
