"""
Resolution of human-readable filter values.

- EntityKind: the four name-addressable dimensions
- EntityResolver: exact name -> identifier lookup through a task store
- validate_status: status label -> Task.Status
"""

import logging

from django.db import models

from .exceptions import EntityNotFound, InvalidArgument
from .models import Task

logger = logging.getLogger(__name__)


class EntityKind(models.TextChoices):
    TEAM = 'team', 'Team'
    OWNER = 'owner', 'Owner'
    TAG = 'tag', 'Tag'
    PROJECT = 'project', 'Project'


def parse_entity_kind(value):
    """Convert a raw kind string to EntityKind, or raise InvalidArgument."""
    try:
        return EntityKind(value)
    except ValueError:
        raise InvalidArgument('kind', value, EntityKind.values)


def validate_status(value):
    """
    Return ``value`` as a Task.Status member.

    Matching is exact: "completed" is not "Completed".

    Raises:
        InvalidArgument: carrying the list of valid status labels
    """
    try:
        return Task.Status(value)
    except ValueError:
        raise InvalidArgument('status', value, Task.Status.values)


class EntityResolver:
    """
    Resolve an entity name to its identifier.

    The store is any object providing ``find_entity_by_name(kind, name)``
    that returns the matching entity or None.
    """

    def __init__(self, store):
        self.store = store

    def resolve(self, kind, name):
        """
        Return the identifier of the entity of ``kind`` named exactly ``name``.

        Raises:
            InvalidArgument: If kind is unsupported or name is empty
            EntityNotFound: If no such entity exists
        """
        kind = parse_entity_kind(kind)
        if not name:
            raise InvalidArgument(f'{kind} name', name, [])

        entity = self.store.find_entity_by_name(kind, name)
        if entity is None:
            logger.info(f'No {kind} named "{name}"')
            raise EntityNotFound(kind, name)
        return entity.pk
