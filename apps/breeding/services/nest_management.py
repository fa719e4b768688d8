"""Nest CRUD operations service."""

from datetime import date
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Nest
from .exceptions import NestNotFoundError, InvalidBreedingDataError


ALLOWED_UPDATE_FIELDS = [
    'couple_id', 'aviary_id', 'start_date', 'active', 'egg_count',
    'expected_hatch_date', 'actual_hatch_date', 'hatched_count', 'notes',
]


def _validate(nest: Nest) -> None:
    if not nest.couple_id:
        raise InvalidBreedingDataError("A nest needs a couple")
    if not nest.start_date:
        raise InvalidBreedingDataError("Start date is required")
    if nest.egg_count is not None and nest.egg_count < 0:
        raise InvalidBreedingDataError("Egg count cannot be negative")


@transaction.atomic
def create_nest(
    *,
    owner: User,
    couple_id: UUID,
    start_date: date,
    aviary_id: Optional[UUID] = None,
    active: bool = True,
    egg_count: Optional[int] = None,
    expected_hatch_date: Optional[date] = None,
    actual_hatch_date: Optional[date] = None,
    hatched_count: Optional[int] = None,
    notes: str = ''
) -> Nest:
    """
    Start a nest for a couple.

    Raises:
        InvalidBreedingDataError: If couple or start date is missing
    """
    nest = Nest(
        owner=owner,
        couple_id=couple_id,
        aviary_id=aviary_id,
        start_date=start_date,
        active=active,
        egg_count=egg_count,
        expected_hatch_date=expected_hatch_date,
        actual_hatch_date=actual_hatch_date,
        hatched_count=hatched_count,
        notes=notes,
    )
    _validate(nest)
    nest.save()
    return nest


@transaction.atomic
def update_nest(
    *,
    owner: User,
    nest_id: UUID,
    data: Dict[str, Any]
) -> Nest:
    """
    Raises:
        NestNotFoundError: If nest doesn't exist for this account
        InvalidBreedingDataError: If the updated nest fails validation
    """
    try:
        nest = (
            Nest.objects
            .select_for_update()
            .get(id=as_uuid(nest_id), owner=owner)
        )
    except Nest.DoesNotExist:
        raise NestNotFoundError(f"Nest {nest_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(nest, field, value)

    _validate(nest)

    nest.save()
    return nest


@transaction.atomic
def delete_nest(*, owner: User, nest_id: UUID) -> None:
    """
    Remove a nest. Its eggs are kept.

    Raises:
        NestNotFoundError: If nest doesn't exist for this account
    """
    deleted, _ = Nest.objects.filter(id=as_uuid(nest_id), owner=owner).delete()
    if not deleted:
        raise NestNotFoundError(f"Nest {nest_id} not found")


def get_nest_by_id(*, owner: User, nest_id: Optional[UUID]) -> Optional[Nest]:
    nest_id = as_uuid(nest_id)
    if nest_id is None:
        return None
    return Nest.objects.filter(id=nest_id, owner=owner).first()


def get_nests(*, owner: User, active: Optional[bool] = None) -> QuerySet[Nest]:
    queryset = Nest.objects.filter(owner=owner)

    if active is not None:
        queryset = queryset.filter(active=active)

    return queryset


def get_nests_by_couple(*, owner: User, couple_id: Optional[UUID]) -> QuerySet[Nest]:
    """Nests of a couple, newest start date first; ties keep insertion order."""
    couple_id = as_uuid(couple_id)
    if couple_id is None:
        return Nest.objects.none()
    return (
        Nest.objects
        .filter(owner=owner, couple_id=couple_id)
        .order_by('-start_date', 'created_at')
    )
