# ==========================================
# apps/breeding/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid


class EggStatus(models.TextChoices):
    LAID = 'laid', 'Laid'
    FERTILE = 'fertile', 'Fertile'
    INFERTILE = 'infertile', 'Infertile'
    HATCHED = 'hatched', 'Hatched'
    DEAD = 'dead', 'Dead'


class Couple(models.Model):
    """
    Breeding pair for one season.

    male_id and female_id are weak references to birds. The genders of the
    referenced birds are not checked.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='couples')
    male_id = models.UUIDField(db_index=True)
    female_id = models.UUIDField(db_index=True)
    season = models.CharField(max_length=20)
    active = models.BooleanField(default=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'couples'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='couples_owner_created_idx'),
            models.Index(fields=['owner', 'season'], name='couples_owner_season_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"Couple {self.season} ({str(self.id)[-6:]})"


class Nest(models.Model):
    """One breeding attempt of a couple. Inactive once hatched."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='nests')
    couple_id = models.UUIDField(db_index=True)
    aviary_id = models.UUIDField(null=True, blank=True)
    start_date = models.DateField()
    active = models.BooleanField(default=True)
    egg_count = models.PositiveIntegerField(null=True, blank=True)
    expected_hatch_date = models.DateField(null=True, blank=True)
    actual_hatch_date = models.DateField(null=True, blank=True)
    hatched_count = models.PositiveIntegerField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'nests'
        indexes = [
            models.Index(fields=['owner', 'couple_id'], name='nests_owner_couple_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"Nest #{self.short_id}"

    @property
    def short_id(self):
        return self.id.hex[-6:]


class Egg(models.Model):
    """Single egg of a nest. bird_id links to the bird once hatched."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='eggs')
    nest_id = models.UUIDField(db_index=True)
    lay_date = models.DateField()
    status = models.CharField(max_length=20, choices=EggStatus.choices, default=EggStatus.LAID)
    hatch_date = models.DateField(null=True, blank=True)
    bird_id = models.UUIDField(null=True, blank=True, db_index=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'eggs'
        indexes = [
            models.Index(fields=['owner', 'nest_id'], name='eggs_owner_nest_idx'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"Egg {self.lay_date} ({self.get_status_display()})"
