"""Aviary CRUD operations service."""

from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Aviary
from .exceptions import AviaryNotFoundError, InvalidAviaryError


ALLOWED_UPDATE_FIELDS = ['name', 'location', 'capacity', 'description', 'notes']


def _validate(name: str, capacity) -> None:
    if not name or not name.strip():
        raise InvalidAviaryError("Name is required")
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise InvalidAviaryError("Capacity must be a whole number of at least 1")


@transaction.atomic
def create_aviary(
    *,
    owner: User,
    name: str,
    capacity: int,
    location: str = '',
    description: str = '',
    notes: str = ''
) -> Aviary:
    """
    Create a new aviary.

    Raises:
        InvalidAviaryError: If name is blank or capacity < 1
    """
    _validate(name, capacity)

    return Aviary.objects.create(
        owner=owner,
        name=name.strip(),
        capacity=capacity,
        location=location,
        description=description,
        notes=notes,
    )


@transaction.atomic
def update_aviary(
    *,
    owner: User,
    aviary_id: UUID,
    data: Dict[str, Any]
) -> Aviary:
    """
    Update an existing aviary.

    Args:
        owner: Account owning the aviary
        aviary_id: Aviary UUID
        data: Fields to update (unknown fields are ignored)

    Returns:
        Updated Aviary instance

    Raises:
        AviaryNotFoundError: If aviary doesn't exist for this account
        InvalidAviaryError: If the result would have no name or capacity < 1
    """
    try:
        aviary = (
            Aviary.objects
            .select_for_update()
            .get(id=as_uuid(aviary_id), owner=owner)
        )
    except Aviary.DoesNotExist:
        raise AviaryNotFoundError(f"Aviary {aviary_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(aviary, field, value)

    _validate(aviary.name, aviary.capacity)

    aviary.save()
    return aviary


@transaction.atomic
def delete_aviary(*, owner: User, aviary_id: UUID) -> None:
    """
    Delete an aviary.

    Birds keep their aviary_id; it simply stops resolving.

    Raises:
        AviaryNotFoundError: If aviary doesn't exist for this account
    """
    deleted, _ = Aviary.objects.filter(id=as_uuid(aviary_id), owner=owner).delete()
    if not deleted:
        raise AviaryNotFoundError(f"Aviary {aviary_id} not found")


def get_aviary_by_id(*, owner: User, aviary_id: Optional[UUID]) -> Optional[Aviary]:
    """Return the aviary, or None when the id is empty or doesn't resolve."""
    aviary_id = as_uuid(aviary_id)
    if aviary_id is None:
        return None
    return Aviary.objects.filter(id=aviary_id, owner=owner).first()


def get_aviaries(*, owner: User) -> QuerySet[Aviary]:
    """All aviaries of an account in creation order."""
    return Aviary.objects.filter(owner=owner)
