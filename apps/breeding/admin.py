# ==========================================
# apps/breeding/admin.py
# ==========================================

from django.contrib import admin
from apps.breeding.models import Couple, Nest, Egg


@admin.register(Couple)
class CoupleAdmin(admin.ModelAdmin):
    list_display = ['id', 'season', 'male_id', 'female_id', 'active', 'owner']
    list_filter = ['active', 'season']
    search_fields = ['owner__email', 'notes']
    readonly_fields = ['id', 'created_at', 'updated_at']


@admin.register(Nest)
class NestAdmin(admin.ModelAdmin):
    """Admin interface for Nests."""

    list_display = ['__str__', 'couple_id', 'start_date', 'active', 'egg_count', 'hatched_count', 'owner']
    list_filter = ['active']
    search_fields = ['owner__email', 'notes']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'start_date'


@admin.register(Egg)
class EggAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'nest_id', 'status', 'hatch_date', 'bird_id', 'owner']
    list_filter = ['status']
    readonly_fields = ['id', 'created_at', 'updated_at']
