"""Aviary occupancy query."""

from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.birds.models import Bird
from .aviary_management import get_aviary_by_id


def get_aviary_occupancy(*, owner: User, aviary_id: UUID) -> Optional[dict]:
    """
    Compare the number of birds assigned to an aviary with its capacity.

    Capacity is advisory: over-assignment is reported, never prevented.
    Every assigned bird counts, whatever its status.

    Returns:
        Dictionary with aviary_id, capacity, bird_count, free_places and
        over_capacity, or None if the aviary doesn't resolve.
    """
    aviary = get_aviary_by_id(owner=owner, aviary_id=aviary_id)
    if aviary is None:
        return None

    bird_count = Bird.objects.filter(owner=owner, aviary_id=aviary.id).count()

    return {
        'aviary_id': str(aviary.id),
        'capacity': aviary.capacity,
        'bird_count': bird_count,
        'free_places': max(0, aviary.capacity - bird_count),
        'over_capacity': bird_count > aviary.capacity,
    }
