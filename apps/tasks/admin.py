"""
Admin configuration for tasks app.
"""

from django.contrib import admin
from .models import Task


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    """Admin for Task model."""

    list_display = ('title', 'status', 'team', 'owner', 'project', 'time_to_complete', 'updated_at')
    list_filter = ('status', 'team', 'project')
    search_fields = ('title', 'description')
    filter_horizontal = ('tags',)
    ordering = ('-updated_at',)

    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('title', 'description', 'status', 'time_to_complete')
        }),
        ('References', {
            'fields': ('team', 'owner', 'project', 'tags'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def get_queryset(self, request):
        """Optimize with select_related."""
        return super().get_queryset(request).select_related('team', 'owner', 'project')
