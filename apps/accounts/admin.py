# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin, messages
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from apps.backups.services import snapshot_account, BackupsServiceError
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for breeder accounts.

    Shows how many birds each account keeps and allows
    bulk activation/deactivation.
    """

    list_display = [
        'email',
        'name',
        'is_active',
        'bird_count',
        'couple_count',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'created_at',
    ]

    search_fields = [
        'email',
        'name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'name', 'password')
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def bird_count(self, obj):
        return obj.birds.count()
    bird_count.short_description = 'Birds'

    def couple_count(self, obj):
        return obj.couples.count()
    couple_count.short_description = 'Couples'

    actions = ['activate_users', 'deactivate_users', 'snapshot_accounts']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        """Activate selected users."""
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (excludes superusers for safety)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)

    @admin.action(description='Snapshot selected accounts to the backup store')
    def snapshot_accounts(self, request, queryset):
        for user in queryset:
            try:
                counts = snapshot_account(user=user)
            except BackupsServiceError as e:
                self.message_user(request, f'{user.email}: {e}', messages.ERROR)
                continue
            self.message_user(request, f'{user.email}: {sum(counts.values())} records saved.')
