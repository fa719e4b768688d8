"""Health record operations service."""

from datetime import date
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional, Dict, Any

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import HealthRecord, HealthRecordType
from .exceptions import HealthRecordNotFoundError, InvalidBirdError


ALLOWED_UPDATE_FIELDS = ['bird_id', 'date', 'type', 'description', 'notes']


def _validate(record: HealthRecord) -> None:
    if not record.bird_id:
        raise InvalidBirdError("A health record needs a bird")
    if not record.description or not record.description.strip():
        raise InvalidBirdError("Description is required")
    if record.type not in HealthRecordType.values:
        raise InvalidBirdError(f"Unknown health record type '{record.type}'")


@transaction.atomic
def create_health_record(
    *,
    owner: User,
    bird_id: UUID,
    date: date,
    description: str,
    type: str = HealthRecordType.CHECKUP,
    notes: str = ''
) -> HealthRecord:
    """
    Record a treatment or checkup for a bird.

    Raises:
        InvalidBirdError: If bird id or description is missing
    """
    record = HealthRecord(
        owner=owner,
        bird_id=bird_id,
        date=date,
        type=type,
        description=description,
        notes=notes,
    )
    _validate(record)
    record.save()
    return record


@transaction.atomic
def update_health_record(
    *,
    owner: User,
    record_id: UUID,
    data: Dict[str, Any]
) -> HealthRecord:
    """
    Update a health record.

    Raises:
        HealthRecordNotFoundError: If record doesn't exist for this account
        InvalidBirdError: If the updated record fails validation
    """
    try:
        record = (
            HealthRecord.objects
            .select_for_update()
            .get(id=as_uuid(record_id), owner=owner)
        )
    except HealthRecord.DoesNotExist:
        raise HealthRecordNotFoundError(f"Health record {record_id} not found")

    for field, value in data.items():
        if field in ALLOWED_UPDATE_FIELDS:
            setattr(record, field, value)

    _validate(record)

    record.save()
    return record


@transaction.atomic
def delete_health_record(*, owner: User, record_id: UUID) -> None:
    """
    Raises:
        HealthRecordNotFoundError: If record doesn't exist for this account
    """
    deleted, _ = HealthRecord.objects.filter(id=as_uuid(record_id), owner=owner).delete()
    if not deleted:
        raise HealthRecordNotFoundError(f"Health record {record_id} not found")


def get_health_record_by_id(*, owner: User, record_id: Optional[UUID]) -> Optional[HealthRecord]:
    record_id = as_uuid(record_id)
    if record_id is None:
        return None
    return HealthRecord.objects.filter(id=record_id, owner=owner).first()


def get_health_records(*, owner: User) -> QuerySet[HealthRecord]:
    return HealthRecord.objects.filter(owner=owner)


def get_health_records_by_bird(*, owner: User, bird_id: Optional[UUID]) -> QuerySet[HealthRecord]:
    """Health records of a bird, most recent date first; same-day records keep insertion order."""
    bird_id = as_uuid(bird_id)
    if bird_id is None:
        return HealthRecord.objects.none()
    return (
        HealthRecord.objects
        .filter(owner=owner, bird_id=bird_id)
        .order_by('-date', 'created_at')
    )
