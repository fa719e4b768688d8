"""Bird search and filtering service."""

from django.db.models import Q, QuerySet
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Bird, BirdStatus


def search_birds(
    *,
    owner: User,
    search: Optional[str] = None,
    status: Optional[str] = None,
    gender: Optional[str] = None,
    aviary_id: Optional[UUID] = None
) -> QuerySet[Bird]:
    """
    Search and filter an account's birds.

    Args:
        owner: Account whose birds are searched
        search: Case-insensitive term matched against ring number, name,
            species and subspecies
        status: Filter by status
        gender: Filter by gender
        aviary_id: Filter by aviary

    Returns:
        Filtered QuerySet of Bird in storage order
    """
    queryset = Bird.objects.filter(owner=owner)

    if search:
        search = search.strip()
        queryset = queryset.filter(
            Q(ring_number__icontains=search) |
            Q(name__icontains=search) |
            Q(species__icontains=search) |
            Q(subspecies__icontains=search)
        )

    if status:
        queryset = queryset.filter(status=status)

    if gender:
        queryset = queryset.filter(gender=gender)

    if aviary_id:
        aviary_id = as_uuid(aviary_id)
        if aviary_id is None:
            return queryset.none()
        queryset = queryset.filter(aviary_id=aviary_id)

    return queryset


def get_breeding_candidates(*, owner: User, gender: str) -> QuerySet[Bird]:
    """Active birds of one gender, offered when pairing a couple."""
    return Bird.objects.filter(owner=owner, gender=gender, status=BirdStatus.ACTIVE)


def get_all_species(*, owner: User) -> list[str]:
    """Sorted list of species names used in the account."""
    species = (
        Bird.objects
        .filter(owner=owner)
        .values_list('species', flat=True)
        .distinct()
        .order_by('species')
    )
    return list(species)
