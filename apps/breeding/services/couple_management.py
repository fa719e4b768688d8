"""Couple CRUD operations service."""

import logging
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Couple
from .exceptions import CoupleNotFoundError, InvalidBreedingDataError

logger = logging.getLogger(__name__)


ALLOWED_UPDATE_FIELDS = ['male_id', 'female_id', 'season', 'active', 'notes']


def _validate(couple: Couple) -> None:
    if not couple.male_id or not couple.female_id:
        raise InvalidBreedingDataError("A couple needs a male and a female")
    if couple.male_id == couple.female_id:
        raise InvalidBreedingDataError("Male and female must be different birds")
    if not couple.season or not str(couple.season).strip():
        raise InvalidBreedingDataError("Season is required")


@transaction.atomic
def create_couple(
    *,
    owner: User,
    male_id: UUID,
    female_id: UUID,
    season: str,
    active: bool = True,
    notes: str = ''
) -> Couple:
    """
    Pair two birds for a season.

    The referenced birds are neither required to exist nor checked for
    gender; candidates are pre-filtered by get_breeding_candidates().

    Raises:
        InvalidBreedingDataError: If a partner or the season is missing
    """
    couple = Couple(
        owner=owner,
        male_id=male_id,
        female_id=female_id,
        season=str(season).strip(),
        active=active,
        notes=notes,
    )
    _validate(couple)
    couple.save()

    logger.info("Couple %s formed for season %s", couple.id, couple.season)
    return couple


@transaction.atomic
def update_couple(
    *,
    owner: User,
    couple_id: UUID,
    data: Dict[str, Any]
) -> Couple:
    """
    Raises:
        CoupleNotFoundError: If couple doesn't exist for this account
        InvalidBreedingDataError: If the updated couple fails validation
    """
    try:
        couple = (
            Couple.objects
            .select_for_update()
            .get(id=as_uuid(couple_id), owner=owner)
        )
    except Couple.DoesNotExist:
        raise CoupleNotFoundError(f"Couple {couple_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(couple, field, value)

    _validate(couple)

    couple.save()
    return couple


@transaction.atomic
def delete_couple(*, owner: User, couple_id: UUID) -> None:
    """
    Remove a couple. Its nests are kept.

    Raises:
        CoupleNotFoundError: If couple doesn't exist for this account
    """
    deleted, _ = Couple.objects.filter(id=as_uuid(couple_id), owner=owner).delete()
    if not deleted:
        raise CoupleNotFoundError(f"Couple {couple_id} not found")


def get_couple_by_id(*, owner: User, couple_id: Optional[UUID]) -> Optional[Couple]:
    """Return the couple, or None when the id is empty or doesn't resolve."""
    couple_id = as_uuid(couple_id)
    if couple_id is None:
        return None
    return Couple.objects.filter(id=couple_id, owner=owner).first()


def get_couples(
    *,
    owner: User,
    season: Optional[str] = None,
    active: Optional[bool] = None
) -> QuerySet[Couple]:
    queryset = Couple.objects.filter(owner=owner)

    if season:
        queryset = queryset.filter(season=season)

    if active is not None:
        queryset = queryset.filter(active=active)

    return queryset
