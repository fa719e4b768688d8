"""
Genealogy resolver.

Walks the weak parent links of birds and the couple -> nest -> egg -> bird
chain. Every link may be absent or dangling; an unresolved link becomes
None (or is left out of a list), never an error.
"""

from django.conf import settings
from django.db.models import Q, QuerySet
from uuid import UUID
from typing import Optional, Dict

from apps.accounts.models import User
from apps.common.ids import as_uuid
from apps.birds.models import Bird
from apps.birds.services import get_bird_by_id
from ..models import Egg, EggStatus
from .nest_management import get_nests_by_couple


def get_parents(*, owner: User, bird_id: Optional[UUID]) -> Dict[str, Optional[Bird]]:
    """
    Resolve the father and mother of a bird independently.

    Returns:
        {'father': Bird | None, 'mother': Bird | None}. Both are None when
        the bird itself doesn't resolve.
    """
    bird = get_bird_by_id(owner=owner, bird_id=bird_id)
    if bird is None:
        return {'father': None, 'mother': None}

    return {
        'father': get_bird_by_id(owner=owner, bird_id=bird.father_id),
        'mother': get_bird_by_id(owner=owner, bird_id=bird.mother_id),
    }


def get_offspring(*, owner: User, couple_id: Optional[UUID]) -> QuerySet[Bird]:
    """
    Birds hatched from a couple's nests.

    couple -> nests -> hatched eggs -> bird_id -> birds. Eggs without a
    bird_id and bird ids that don't resolve are dropped. Birds come back
    in storage order, not hatch order.
    """
    nest_ids = get_nests_by_couple(owner=owner, couple_id=couple_id).values_list('id', flat=True)

    bird_ids = (
        Egg.objects
        .filter(
            owner=owner,
            nest_id__in=list(nest_ids),
            status=EggStatus.HATCHED,
            bird_id__isnull=False,
        )
        .values_list('bird_id', flat=True)
    )

    return Bird.objects.filter(owner=owner, id__in=list(bird_ids))


def get_children(*, owner: User, bird_id: Optional[UUID]) -> QuerySet[Bird]:
    """Birds whose father_id or mother_id is this bird, in storage order."""
    bird_id = as_uuid(bird_id)
    if bird_id is None:
        return Bird.objects.none()
    return Bird.objects.filter(owner=owner).filter(
        Q(father_id=bird_id) | Q(mother_id=bird_id)
    )


def get_pedigree(*, owner: User, bird_id: Optional[UUID], depth: int = 3) -> Optional[dict]:
    """
    Ancestor tree of a bird.

    Args:
        owner: Account to resolve birds in
        bird_id: Root bird
        depth: Ancestor generations to include, clamped to
            0..BIRD_PEDIGREE_MAX_DEPTH. The bound also stops cyclic
            parent links.

    Returns:
        {'bird': Bird, 'father': node | None, 'mother': node | None}, or
        None when the root bird doesn't resolve.
    """
    depth = max(0, min(depth, settings.BIRD_PEDIGREE_MAX_DEPTH))

    bird = get_bird_by_id(owner=owner, bird_id=bird_id)
    if bird is None:
        return None

    return _pedigree_node(owner, bird, depth)


def _pedigree_node(owner, bird, depth):
    node = {'bird': bird, 'father': None, 'mother': None}
    if depth == 0:
        return node

    for role, parent_id in (('father', bird.father_id), ('mother', bird.mother_id)):
        parent = get_bird_by_id(owner=owner, bird_id=parent_id)
        if parent is not None:
            node[role] = _pedigree_node(owner, parent, depth - 1)

    return node
