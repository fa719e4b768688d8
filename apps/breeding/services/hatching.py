"""
Hatching Service
================

Closes a nest's breeding cycle: a confirmed hatch count becomes new birds,
hatched egg records and an inactive nest, all in one transaction.

Example:
    Hatching three chicks::

        from apps.breeding.services import hatch_nest

        birds = hatch_nest(
            owner=request.user,
            nest_id=nest.id,
            hatched_count=3,
            hatch_date=date(2025, 4, 12),
        )

        # Three new birds, each with the couple as parents
        get_offspring(owner=request.user, couple_id=nest.couple_id)
"""

import logging
from datetime import date
from django.db import transaction
from uuid import UUID
from typing import List

from apps.accounts.models import User
from apps.common.ids import as_uuid
from apps.birds.models import Bird, Gender, Origin, BirdStatus
from apps.birds.services import get_bird_by_id
from ..models import Nest, Egg, EggStatus
from .couple_management import get_couple_by_id
from .exceptions import NestNotFoundError, NestNotActiveError, InvalidHatchCountError

logger = logging.getLogger(__name__)


UNKNOWN_SPECIES = 'Unknown'


def effective_egg_count(*, owner: User, nest: Nest) -> int:
    """
    Number of eggs a hatch count is checked against.

    The nest's own egg_count when set and non-zero, otherwise the number of
    egg records of the nest, otherwise 0.
    """
    if nest.egg_count:
        return nest.egg_count
    return Egg.objects.filter(owner=owner, nest_id=nest.id).count()


def _ring_number(nest: Nest, hatch_date: date, index: int) -> str:
    return f"{nest.short_id}-{hatch_date:%Y%m%d}-{index + 1}"


@transaction.atomic
def hatch_nest(
    *,
    owner: User,
    nest_id: UUID,
    hatched_count: int,
    hatch_date: date
) -> List[Bird]:
    """
    Mark eggs of a nest as hatched and add the chicks to the flock.

    Steps:
        1. Lock the nest; it must exist and still be active.
        2. Check 1 <= hatched_count <= effective egg count.
        3. Resolve the couple's male and female. Either may be gone.
        4. Create hatched_count birds: gender unknown, origin bred, born on
           hatch_date, parents set to the resolved birds (None for a parent
           that no longer exists), species from the father, else the
           mother, else 'Unknown'.
        5. Link each bird to an egg. The oldest laid/fertile eggs of the
           nest become hatched; missing egg records are created.
        6. Deactivate the nest, record the count and date, and append a
           summary to its notes.

    A rejected call changes nothing.

    Args:
        owner: Account owning the nest
        nest_id: Nest UUID
        hatched_count: Number of chicks
        hatch_date: Date the eggs hatched

    Returns:
        List of the created Bird instances, in creation order.

    Raises:
        NestNotFoundError: If nest doesn't exist for this account
        NestNotActiveError: If the nest already hatched
        InvalidHatchCountError: If hatched_count is outside 1..egg count
    """
    try:
        nest = (
            Nest.objects
            .select_for_update()
            .get(id=as_uuid(nest_id), owner=owner)
        )
    except Nest.DoesNotExist:
        raise NestNotFoundError(f"Nest {nest_id} not found")

    if not nest.active:
        raise NestNotActiveError(f"Nest {nest.short_id} has already hatched")

    egg_count = effective_egg_count(owner=owner, nest=nest)
    if hatched_count < 1 or hatched_count > egg_count:
        raise InvalidHatchCountError(f"Enter a valid number between 1 and {egg_count}")

    couple = get_couple_by_id(owner=owner, couple_id=nest.couple_id)
    male = get_bird_by_id(owner=owner, bird_id=couple.male_id) if couple else None
    female = get_bird_by_id(owner=owner, bird_id=couple.female_id) if couple else None

    if male:
        species = male.species
    elif female:
        species = female.species
    else:
        species = UNKNOWN_SPECIES

    note = f"Hatched from nest {nest.short_id} on {hatch_date:%Y-%m-%d}"

    birds = []
    for i in range(hatched_count):
        bird = Bird.objects.create(
            owner=owner,
            ring_number=_ring_number(nest, hatch_date, i),
            species=species,
            gender=Gender.UNKNOWN,
            birth_date=hatch_date,
            origin=Origin.BRED,
            status=BirdStatus.ACTIVE,
            father_id=male.id if male else None,
            mother_id=female.id if female else None,
            notes=note,
        )
        birds.append(bird)

    open_eggs = list(
        Egg.objects
        .select_for_update()
        .filter(
            owner=owner,
            nest_id=nest.id,
            status__in=[EggStatus.LAID, EggStatus.FERTILE],
        )
        .order_by('lay_date', 'created_at')[:hatched_count]
    )

    for egg, bird in zip(open_eggs, birds):
        egg.status = EggStatus.HATCHED
        egg.hatch_date = hatch_date
        egg.bird_id = bird.id
        egg.save(update_fields=['status', 'hatch_date', 'bird_id', 'updated_at'])

    for bird in birds[len(open_eggs):]:
        Egg.objects.create(
            owner=owner,
            nest_id=nest.id,
            lay_date=nest.start_date,
            status=EggStatus.HATCHED,
            hatch_date=hatch_date,
            bird_id=bird.id,
        )

    nest.active = False
    nest.hatched_count = hatched_count
    nest.actual_hatch_date = hatch_date
    nest.notes = f"{nest.notes} - {hatched_count} eggs hatched on {hatch_date:%Y-%m-%d}"
    nest.save()

    logger.info(
        "Nest %s hatched: %d new birds for %s",
        nest.id, hatched_count, owner.email
    )
    return birds
