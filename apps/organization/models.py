"""
Organization models referenced by tasks.

Models:
- Team: Group of people working on tasks
- Project: Body of work tasks belong to
- Tag: Free-form label attached to tasks

Names are unique per model; tasks reference these by identifier only.
"""

from django.db import models


class NamedEntity(models.Model):
    """Abstract base for entities looked up by their unique name."""

    name = models.CharField(
        max_length=100,
        unique=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['name']

    def __str__(self):
        return self.name


class Team(NamedEntity):
    description = models.TextField(blank=True)

    class Meta(NamedEntity.Meta):
        verbose_name = 'team'
        verbose_name_plural = 'teams'


class Project(NamedEntity):
    description = models.TextField(blank=True)

    class Meta(NamedEntity.Meta):
        verbose_name = 'project'
        verbose_name_plural = 'projects'


class Tag(NamedEntity):

    class Meta(NamedEntity.Meta):
        verbose_name = 'tag'
        verbose_name_plural = 'tags'
