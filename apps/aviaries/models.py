from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
import uuid


class Aviary(models.Model):
    """Cage or flight where birds are housed. Capacity is advisory only."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='aviaries')
    name = models.CharField(max_length=200)
    location = models.CharField(max_length=200, blank=True)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    description = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'aviaries'
        indexes = [
            models.Index(fields=['owner', 'created_at'], name='aviaries_owner_created_idx'),
        ]
        ordering = ['created_at']
        verbose_name_plural = 'aviaries'

    def __str__(self):
        return self.name
