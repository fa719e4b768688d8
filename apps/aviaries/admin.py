# ==========================================
# apps/aviaries/admin.py
# ==========================================

from django.contrib import admin
from apps.aviaries.models import Aviary
from apps.birds.models import Bird


@admin.register(Aviary)
class AviaryAdmin(admin.ModelAdmin):
    """Admin interface for Aviaries."""

    list_display = ['name', 'owner', 'location', 'capacity', 'bird_count', 'created_at']
    search_fields = ['name', 'location', 'owner__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']

    def bird_count(self, obj):
        """Show number of birds assigned (may exceed capacity)."""
        return Bird.objects.filter(owner=obj.owner, aviary_id=obj.id).count()
    bird_count.short_description = 'Birds'
