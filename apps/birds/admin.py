# ==========================================
# apps/birds/admin.py
# ==========================================

from django.contrib import admin
from apps.birds.models import Bird, HealthRecord


@admin.register(Bird)
class BirdAdmin(admin.ModelAdmin):
    """Admin interface for Birds."""

    list_display = ['ring_number', 'name', 'species', 'gender', 'status', 'owner', 'birth_date']
    list_filter = ['gender', 'status', 'origin']
    search_fields = ['ring_number', 'name', 'species', 'owner__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
    ordering = ['-created_at']

    fieldsets = (
        ('Identity', {
            'fields': ('id', 'owner', 'ring_number', 'name', 'species', 'subspecies', 'color_mutation')
        }),
        ('Details', {
            'fields': ('gender', 'birth_date', 'origin', 'status', 'image_uri', 'notes')
        }),
        ('Links', {
            'fields': ('aviary_id', 'father_id', 'mother_id')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(HealthRecord)
class HealthRecordAdmin(admin.ModelAdmin):
    list_display = ['date', 'type', 'description', 'bird_id', 'owner']
    list_filter = ['type']
    search_fields = ['description', 'owner__email']
    readonly_fields = ['id', 'created_at', 'updated_at']
