"""Egg CRUD operations service."""

from datetime import date
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Egg, EggStatus
from .exceptions import EggNotFoundError, InvalidBreedingDataError


ALLOWED_UPDATE_FIELDS = ['nest_id', 'lay_date', 'status', 'hatch_date', 'bird_id', 'notes']


def _validate(egg: Egg) -> None:
    if not egg.nest_id:
        raise InvalidBreedingDataError("An egg needs a nest")
    if not egg.lay_date:
        raise InvalidBreedingDataError("Lay date is required")
    if egg.status not in EggStatus.values:
        raise InvalidBreedingDataError(f"Unknown egg status '{egg.status}'")


@transaction.atomic
def create_egg(
    *,
    owner: User,
    nest_id: UUID,
    lay_date: date,
    status: str = EggStatus.LAID,
    hatch_date: Optional[date] = None,
    bird_id: Optional[UUID] = None,
    notes: str = ''
) -> Egg:
    """
    Record an egg in a nest.

    Raises:
        InvalidBreedingDataError: If nest or lay date is missing
    """
    egg = Egg(
        owner=owner,
        nest_id=nest_id,
        lay_date=lay_date,
        status=status,
        hatch_date=hatch_date,
        bird_id=bird_id,
        notes=notes,
    )
    _validate(egg)
    egg.save()
    return egg


@transaction.atomic
def update_egg(
    *,
    owner: User,
    egg_id: UUID,
    data: Dict[str, Any]
) -> Egg:
    """
    Raises:
        EggNotFoundError: If egg doesn't exist for this account
        InvalidBreedingDataError: If the updated egg fails validation
    """
    try:
        egg = (
            Egg.objects
            .select_for_update()
            .get(id=as_uuid(egg_id), owner=owner)
        )
    except Egg.DoesNotExist:
        raise EggNotFoundError(f"Egg {egg_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(egg, field, value)

    _validate(egg)

    egg.save()
    return egg


@transaction.atomic
def delete_egg(*, owner: User, egg_id: UUID) -> None:
    """
    Raises:
        EggNotFoundError: If egg doesn't exist for this account
    """
    deleted, _ = Egg.objects.filter(id=as_uuid(egg_id), owner=owner).delete()
    if not deleted:
        raise EggNotFoundError(f"Egg {egg_id} not found")


def get_egg_by_id(*, owner: User, egg_id: Optional[UUID]) -> Optional[Egg]:
    egg_id = as_uuid(egg_id)
    if egg_id is None:
        return None
    return Egg.objects.filter(id=egg_id, owner=owner).first()


def get_eggs(*, owner: User) -> QuerySet[Egg]:
    return Egg.objects.filter(owner=owner)


def get_eggs_by_nest(*, owner: User, nest_id: Optional[UUID]) -> QuerySet[Egg]:
    """Eggs of a nest, oldest lay date first; ties keep insertion order."""
    nest_id = as_uuid(nest_id)
    if nest_id is None:
        return Egg.objects.none()
    return (
        Egg.objects
        .filter(owner=owner, nest_id=nest_id)
        .order_by('lay_date', 'created_at')
    )
