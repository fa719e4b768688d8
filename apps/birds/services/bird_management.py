"""Bird CRUD operations service."""

import logging
from datetime import date
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Bird, Gender, Origin, BirdStatus
from .exceptions import BirdNotFoundError, InvalidBirdError

logger = logging.getLogger(__name__)


ALLOWED_UPDATE_FIELDS = [
    'ring_number', 'name', 'species', 'subspecies', 'gender',
    'color_mutation', 'birth_date', 'origin', 'status', 'aviary_id',
    'father_id', 'mother_id', 'image_uri', 'notes',
]


def _validate(bird: Bird) -> None:
    if not bird.ring_number or not bird.ring_number.strip():
        raise InvalidBirdError("Ring number is required")
    if not bird.species or not bird.species.strip():
        raise InvalidBirdError("Species is required")
    if bird.gender not in Gender.values:
        raise InvalidBirdError(f"Unknown gender '{bird.gender}'")
    if bird.origin not in Origin.values:
        raise InvalidBirdError(f"Unknown origin '{bird.origin}'")
    if bird.status not in BirdStatus.values:
        raise InvalidBirdError(f"Unknown status '{bird.status}'")
    if bird.id in (bird.father_id, bird.mother_id):
        raise InvalidBirdError("A bird cannot be its own parent")


@transaction.atomic
def create_bird(
    *,
    owner: User,
    ring_number: str,
    species: str,
    birth_date: date,
    gender: str = Gender.UNKNOWN,
    origin: str = Origin.PURCHASED,
    status: str = BirdStatus.ACTIVE,
    name: str = '',
    subspecies: str = '',
    color_mutation: str = '',
    aviary_id: Optional[UUID] = None,
    father_id: Optional[UUID] = None,
    mother_id: Optional[UUID] = None,
    image_uri: str = '',
    notes: str = ''
) -> Bird:
    """
    Create a new bird.

    Ring numbers are not required to be unique and none of the
    aviary/parent ids are checked for existence.

    Raises:
        InvalidBirdError: If ring number or species is blank, or a choice
            field holds an unknown value
    """
    bird = Bird(
        owner=owner,
        ring_number=(ring_number or '').strip(),
        name=name,
        species=(species or '').strip(),
        subspecies=subspecies,
        gender=gender,
        color_mutation=color_mutation,
        birth_date=birth_date,
        origin=origin,
        status=status,
        aviary_id=aviary_id,
        father_id=father_id,
        mother_id=mother_id,
        image_uri=image_uri,
        notes=notes,
    )
    _validate(bird)
    bird.save()

    logger.info("Bird %s (%s) added for %s", bird.id, bird.ring_number, owner.email)
    return bird


@transaction.atomic
def update_bird(
    *,
    owner: User,
    bird_id: UUID,
    data: Dict[str, Any]
) -> Bird:
    """
    Update an existing bird. Unknown fields are ignored.

    Also used for aviary assignment (data={'aviary_id': ...}).

    Raises:
        BirdNotFoundError: If bird doesn't exist for this account
        InvalidBirdError: If the updated bird fails validation
    """
    try:
        bird = (
            Bird.objects
            .select_for_update()
            .get(id=as_uuid(bird_id), owner=owner)
        )
    except Bird.DoesNotExist:
        raise BirdNotFoundError(f"Bird {bird_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(bird, field, value)

    _validate(bird)

    bird.save()
    return bird


@transaction.atomic
def delete_bird(*, owner: User, bird_id: UUID) -> None:
    """
    Remove a bird.

    Couples, nests, eggs, health records and children that reference the
    bird are left untouched; their references stop resolving.

    Raises:
        BirdNotFoundError: If bird doesn't exist for this account
    """
    deleted, _ = Bird.objects.filter(id=as_uuid(bird_id), owner=owner).delete()
    if not deleted:
        raise BirdNotFoundError(f"Bird {bird_id} not found")

    logger.info("Bird %s removed for %s", bird_id, owner.email)


def get_bird_by_id(*, owner: User, bird_id: Optional[UUID]) -> Optional[Bird]:
    """Return the bird, or None when the id is empty or doesn't resolve."""
    bird_id = as_uuid(bird_id)
    if bird_id is None:
        return None
    return Bird.objects.filter(id=bird_id, owner=owner).first()


def get_birds(*, owner: User) -> QuerySet[Bird]:
    return Bird.objects.filter(owner=owner)


def get_birds_by_aviary(*, owner: User, aviary_id: Optional[UUID]) -> QuerySet[Bird]:
    """
    Birds assigned to an aviary, in storage order.

    An aviary without birds and an aviary that doesn't exist both give an
    empty result.
    """
    aviary_id = as_uuid(aviary_id)
    if aviary_id is None:
        return Bird.objects.none()
    return Bird.objects.filter(owner=owner, aviary_id=aviary_id)
