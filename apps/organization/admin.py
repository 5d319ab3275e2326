"""
Admin configuration for organization app.
"""

from django.contrib import admin
from .models import Project, Tag, Team


@admin.register(Team, Project)
class DescribedEntityAdmin(admin.ModelAdmin):
    """Admin for Team and Project."""

    list_display = ('name', 'created_at')
    search_fields = ('name',)
    ordering = ('name',)

    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('name', 'description')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'created_at')
    search_fields = ('name',)
    ordering = ('name',)
    readonly_fields = ('created_at', 'updated_at')
