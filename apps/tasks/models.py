"""
Task model.

A task references its team, owner, project and tags by identifier.
``updated_at`` changes on every save and drives the trailing-window
completion report.
"""

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class Task(models.Model):
    """
    Main Task model.

    Status is one of the four board columns; there is no enforced
    transition workflow.
    """

    class Status(models.TextChoices):
        TO_DO = 'To Do', 'To Do'
        IN_PROGRESS = 'In Progress', 'In Progress'
        COMPLETED = 'Completed', 'Completed'
        BLOCKED = 'Blocked', 'Blocked'

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)

    # Relationships
    team = models.ForeignKey(
        'organization.Team',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tasks',
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='owned_tasks',
        help_text='User responsible for completing this task'
    )
    project = models.ForeignKey(
        'organization.Project',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tasks',
    )
    tags = models.ManyToManyField(
        'organization.Tag',
        blank=True,
        related_name='tasks',
    )

    status = models.CharField(
        max_length=15,
        choices=Status.choices,
        default=Status.TO_DO,
        db_index=True,
    )
    time_to_complete = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text='Estimated work-days to complete'
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        verbose_name = 'task'
        verbose_name_plural = 'tasks'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'updated_at'], name='task_status_updated_idx'),
            models.Index(fields=['status', 'team'], name='task_status_team_idx'),
            models.Index(fields=['status', 'owner'], name='task_status_owner_idx'),
            models.Index(fields=['status', 'project'], name='task_status_project_idx'),
        ]

    def __str__(self):
        return f"#{self.pk}: {self.title}"

    @property
    def is_completed(self):
        return self.status == self.Status.COMPLETED
