"""
Breeding services - Business logic layer.

- Couple, nest and egg CRUD operations
- Relationship queries (nests of a couple, eggs of a nest)
- Hatching transition
- Genealogy (parents, offspring, children, pedigree)
"""

from .exceptions import (
    BreedingServiceError,
    CoupleNotFoundError,
    NestNotFoundError,
    EggNotFoundError,
    InvalidBreedingDataError,
    NestNotActiveError,
    InvalidHatchCountError,
)
from .couple_management import (
    create_couple,
    update_couple,
    delete_couple,
    get_couple_by_id,
    get_couples,
)
from .nest_management import (
    create_nest,
    update_nest,
    delete_nest,
    get_nest_by_id,
    get_nests,
    get_nests_by_couple,
)
from .egg_management import (
    create_egg,
    update_egg,
    delete_egg,
    get_egg_by_id,
    get_eggs,
    get_eggs_by_nest,
)
from .hatching import (
    hatch_nest,
    effective_egg_count,
)
from .genealogy import (
    get_parents,
    get_offspring,
    get_children,
    get_pedigree,
)

__all__ = [
    # Exceptions
    'BreedingServiceError',
    'CoupleNotFoundError',
    'NestNotFoundError',
    'EggNotFoundError',
    'InvalidBreedingDataError',
    'NestNotActiveError',
    'InvalidHatchCountError',
    # Couples
    'create_couple',
    'update_couple',
    'delete_couple',
    'get_couple_by_id',
    'get_couples',
    # Nests
    'create_nest',
    'update_nest',
    'delete_nest',
    'get_nest_by_id',
    'get_nests',
    'get_nests_by_couple',
    # Eggs
    'create_egg',
    'update_egg',
    'delete_egg',
    'get_egg_by_id',
    'get_eggs',
    'get_eggs_by_nest',
    # Hatching
    'hatch_nest',
    'effective_egg_count',
    # Genealogy
    'get_parents',
    'get_offspring',
    'get_children',
    'get_pedigree',
]
