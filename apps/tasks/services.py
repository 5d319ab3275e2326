"""
Service layer for tasks app.

All business logic for task operations is centralized here.

Services:
- create_task: Create a task with validated references
- update_task: Update task fields (refreshes updated_at)
- delete_task: Delete a task
- serialize_task: Plain dict for JSON responses
- TaskQueryService: Run a canonical predicate against the task store
"""

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.organization.models import Project, Tag, Team
from .exceptions import EmptyResult
from .models import Task

logger = logging.getLogger(__name__)

# Request field -> (model field, referenced model getter)
REFERENCE_FIELDS = {
    'team': ('team', lambda: Team),
    'owner': ('owner', get_user_model),
    'project': ('project', lambda: Project),
}

EDITABLE_FIELDS = ['title', 'description', 'status', 'team', 'owner', 'project', 'tags', 'timeToComplete']


def _resolve_reference(field, value):
    """Return the referenced instance for an identifier, or None for null."""
    if value is None or value == '':
        return None
    _, get_model = REFERENCE_FIELDS[field]
    model = get_model()
    try:
        return model.objects.get(pk=value)
    except (model.DoesNotExist, ValueError, TypeError):
        raise ValidationError(f"Unknown {field}: {value}")


def _resolve_tags(values):
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        values = [values]
    try:
        ids = {int(value) for value in values}
    except (ValueError, TypeError):
        raise ValidationError(f"Invalid tags: {values}")
    tags = list(Tag.objects.filter(pk__in=ids))
    missing = ids - {tag.pk for tag in tags}
    if missing:
        raise ValidationError(f"Unknown tags: {', '.join(str(pk) for pk in sorted(missing))}")
    return tags


def _apply_fields(task, data):
    """Copy request fields onto a task instance; returns tags to set or None."""
    if 'title' in data:
        title = data['title']
        if not title or not str(title).strip():
            raise ValidationError("Task title cannot be empty.")
        task.title = str(title).strip()

    if 'description' in data:
        description = data['description']
        if description is not None and not isinstance(description, str):
            raise ValidationError("Task description must be a string.")
        task.description = (description or '').strip()

    if 'status' in data:
        task.status = data['status']

    for field, (model_field, _) in REFERENCE_FIELDS.items():
        if field in data:
            setattr(task, model_field, _resolve_reference(field, data[field]))

    if 'timeToComplete' in data:
        task.time_to_complete = data['timeToComplete']

    if 'tags' in data:
        return _resolve_tags(data['tags'])
    return None


def _reject_unknown_fields(data):
    unknown = set(data) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Unknown fields: {', '.join(sorted(unknown))}")


def create_task(data):
    """
    Create a task from request data.

    Args:
        data: Mapping with ``title`` (required) and any of ``description``,
              ``status``, ``team``, ``owner``, ``project`` (identifiers),
              ``tags`` (list of identifiers), ``timeToComplete``

    Returns:
        Created Task instance

    Raises:
        ValidationError: If a field is missing, unknown or out of range
    """
    if not data.get('title') or not str(data['title']).strip():
        raise ValidationError("Task title is required.")
    _reject_unknown_fields(data)

    task = Task()
    with transaction.atomic():
        tags = _apply_fields(task, data)
        task.full_clean(exclude=['tags'])
        task.save()
        if tags is not None:
            task.tags.set(tags)

    logger.info(f'Task created: {task}')
    return task


def update_task(task, data):
    """
    Update task fields.

    Every successful update saves the task, so ``updated_at`` moves even
    when only non-status fields change.

    Raises:
        ValidationError: If validation fails
    """
    _reject_unknown_fields(data)

    with transaction.atomic():
        tags = _apply_fields(task, data)
        task.full_clean(exclude=['tags'])
        task.save()
        if tags is not None:
            task.tags.set(tags)

    logger.info(f'Task updated: {task} ({", ".join(sorted(data))})')
    return task


def delete_task(task):
    task_repr = str(task)
    with transaction.atomic():
        task.delete()
    logger.info(f'Task deleted: {task_repr}')


def serialize_task(task):
    return {
        'id': task.pk,
        'title': task.title,
        'description': task.description,
        'status': task.status,
        'team': task.team_id,
        'owner': task.owner_id,
        'project': task.project_id,
        'tags': [tag.pk for tag in task.tags.all()],
        'timeToComplete': task.time_to_complete,
        'createdAt': task.created_at.isoformat() if task.created_at else None,
        'updatedAt': task.updated_at.isoformat() if task.updated_at else None,
    }


# =============================================================================
# Query Helpers
# =============================================================================

class TaskQueryService:
    """
    Execute canonical predicates against a task store.

    An empty result is valid; callers that want to report "no data"
    differently from a resolution failure pass ``allow_empty=False``.
    """

    def __init__(self, store):
        self.store = store

    def query_tasks(self, predicate=None, allow_empty=True):
        """
        Return the tasks matching ``predicate``.

        Raises:
            EmptyResult: If nothing matched and ``allow_empty`` is False
        """
        tasks = self.store.find_tasks(predicate)
        if not tasks and not allow_empty:
            raise EmptyResult()
        return tasks
