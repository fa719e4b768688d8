# ==========================================
# apps/birds/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class Gender(models.TextChoices):
    MALE = 'male', 'Male'
    FEMALE = 'female', 'Female'
    UNKNOWN = 'unknown', 'Unknown'


class Origin(models.TextChoices):
    PURCHASED = 'purchased', 'Purchased'
    BRED = 'bred', 'Bred'
    RESCUE = 'rescue', 'Rescue'


class BirdStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    DECEASED = 'deceased', 'Deceased'
    SOLD = 'sold', 'Sold'
    EXCHANGED = 'exchanged', 'Exchanged'


class HealthRecordType(models.TextChoices):
    VACCINATION = 'vaccination', 'Vaccination'
    MEDICATION = 'medication', 'Medication'
    CHECKUP = 'checkup', 'Checkup'
    OTHER = 'other', 'Other'


class Bird(models.Model):
    """
    A bird in the flock.

    aviary_id, father_id and mother_id are weak references: they are not
    checked on write and may point at rows that no longer exist.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='birds')
    ring_number = models.CharField(max_length=100, db_index=True)
    name = models.CharField(max_length=200, blank=True)
    species = models.CharField(max_length=200)
    subspecies = models.CharField(max_length=200, blank=True)
    gender = models.CharField(max_length=20, choices=Gender.choices, default=Gender.UNKNOWN)
    color_mutation = models.CharField(max_length=200, blank=True)
    birth_date = models.DateField()
    origin = models.CharField(max_length=20, choices=Origin.choices, default=Origin.PURCHASED)
    status = models.CharField(max_length=20, choices=BirdStatus.choices, default=BirdStatus.ACTIVE)
    aviary_id = models.UUIDField(null=True, blank=True, db_index=True)
    father_id = models.UUIDField(null=True, blank=True, db_index=True)
    mother_id = models.UUIDField(null=True, blank=True, db_index=True)
    image_uri = models.CharField(max_length=500, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'birds'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='birds_owner_created_idx'),
            models.Index(fields=['owner', 'status'], name='birds_owner_status_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        if self.name:
            return f"{self.ring_number} ({self.name})"
        return self.ring_number

    @property
    def age_years(self):
        """Completed years since birth_date."""
        today = timezone.localdate()
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return max(years, 0)


class HealthRecord(models.Model):
    """Vet visit, treatment or checkup of one bird."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='health_records')
    bird_id = models.UUIDField(db_index=True)
    date = models.DateField()
    type = models.CharField(max_length=20, choices=HealthRecordType.choices, default=HealthRecordType.CHECKUP)
    description = models.CharField(max_length=500)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'health_records'
        indexes = [
            models.Index(fields=['owner', 'bird_id'], name='health_owner_bird_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.get_type_display()} on {self.date}"
