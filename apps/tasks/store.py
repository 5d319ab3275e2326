"""
Task store: the storage collaborator used by resolution and reporting.

The store is an explicit handle bound to one database alias. Views build
it through ``get_task_store()`` and pass it into the resolver, query
service and report engine.
"""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DEFAULT_DB_ALIAS

from apps.organization.models import Project, Tag, Team
from .filters import TaskPredicate, TaskPredicateFilterSet
from .models import Task
from .resolvers import EntityKind


class TaskStore:
    """
    Read access to tasks and the entities they reference.

    Tasks are always returned ordered by primary key.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _model_for(self, kind):
        if kind == EntityKind.OWNER:
            return get_user_model()
        return {
            EntityKind.TEAM: Team,
            EntityKind.TAG: Tag,
            EntityKind.PROJECT: Project,
        }[kind]

    def find_entity_by_name(self, kind, name):
        """Return the entity of ``kind`` whose name is exactly ``name``, or None."""
        model = self._model_for(EntityKind(kind))
        return (
            model.objects.using(self.using)
            .filter(name=name)
            .order_by('pk')
            .first()
        )

    def task_queryset(self):
        return (
            Task.objects.using(self.using)
            .select_related('team', 'owner', 'project')
            .prefetch_related('tags')
            .order_by('pk')
        )

    def find_tasks(self, predicate=None):
        """Return the list of tasks matching ``predicate`` (all tasks if None)."""
        if predicate is None:
            predicate = TaskPredicate()
        filterset = TaskPredicateFilterSet(
            predicate.as_filter_data(),
            queryset=self.task_queryset(),
        )
        return list(filterset.qs)


def get_task_store():
    """Build the task store for the configured database alias."""
    return TaskStore(using=settings.TASK_STORE_DATABASE)
