"""
Task filtering.

Human-readable criteria (team name, owner name, tag name, project name,
status label) are turned into a canonical TaskPredicate of identifiers by
FilterBuilder. The store applies a predicate through TaskPredicateFilterSet
(django-filter).

Criteria are conjunctive; an absent criterion does not filter.
"""

from dataclasses import dataclass, fields
from typing import Optional

import django_filters

from .models import Task
from .resolvers import EntityKind, EntityResolver, validate_status


@dataclass(frozen=True)
class TaskCriteria:
    """Raw filter criteria, one optional slot per dimension."""

    team_name: Optional[str] = None
    owner_name: Optional[str] = None
    tag_name: Optional[str] = None
    project_name: Optional[str] = None
    status: Optional[str] = None

    # Query parameter -> criteria slot
    QUERY_PARAMS = {
        'team': 'team_name',
        'owner': 'owner_name',
        'tags': 'tag_name',
        'project': 'project_name',
        'status': 'status',
    }

    @classmethod
    def from_query_params(cls, params):
        """
        Build criteria from a QueryDict or plain mapping.

        Empty values count as absent.
        """
        values = {}
        for param, slot in cls.QUERY_PARAMS.items():
            value = params.get(param)
            if value:
                values[slot] = value
        return cls(**values)

    @property
    def is_empty(self):
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass(frozen=True)
class TaskPredicate:
    """Canonical task filter expressed in identifiers only."""

    team_id: Optional[int] = None
    owner_id: Optional[int] = None
    tag_id: Optional[int] = None
    project_id: Optional[int] = None
    status: Optional[Task.Status] = None

    @property
    def is_unfiltered(self):
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_filter_data(self):
        """Return the non-empty slots keyed by TaskPredicateFilterSet field."""
        data = {
            'team': self.team_id,
            'owner': self.owner_id,
            'tag': self.tag_id,
            'project': self.project_id,
            'status': self.status.value if self.status is not None else None,
        }
        return {key: value for key, value in data.items() if value is not None}


class FilterBuilder:
    """
    Compose a TaskPredicate from TaskCriteria.

    Resolution is fail-fast: the first criterion that does not resolve
    raises, and no partial predicate is returned.
    """

    # Criteria slot -> (entity kind, predicate slot)
    NAMED_DIMENSIONS = (
        ('team_name', EntityKind.TEAM, 'team_id'),
        ('owner_name', EntityKind.OWNER, 'owner_id'),
        ('tag_name', EntityKind.TAG, 'tag_id'),
        ('project_name', EntityKind.PROJECT, 'project_id'),
    )

    def __init__(self, resolver):
        self.resolver = resolver

    @classmethod
    def for_store(cls, store):
        return cls(EntityResolver(store))

    def build(self, criteria=None):
        """
        Resolve criteria into a predicate.

        Raises:
            EntityNotFound: A provided name does not match any entity
            InvalidArgument: The provided status is not a valid label
        """
        if criteria is None:
            criteria = TaskCriteria()

        resolved = {}
        for criteria_slot, kind, predicate_slot in self.NAMED_DIMENSIONS:
            name = getattr(criteria, criteria_slot)
            if name is not None:
                resolved[predicate_slot] = self.resolver.resolve(kind, name)

        if criteria.status is not None:
            resolved['status'] = validate_status(criteria.status)

        return TaskPredicate(**resolved)


class TaskPredicateFilterSet(django_filters.FilterSet):
    """
    Apply a TaskPredicate to a Task queryset.

    Usage:
        filterset = TaskPredicateFilterSet(predicate.as_filter_data(), queryset=qs)
        tasks = filterset.qs
    """

    team = django_filters.NumberFilter(field_name='team_id')
    owner = django_filters.NumberFilter(field_name='owner_id')
    tag = django_filters.NumberFilter(field_name='tags', distinct=True)
    project = django_filters.NumberFilter(field_name='project_id')
    status = django_filters.ChoiceFilter(choices=Task.Status.choices)

    class Meta:
        model = Task
        fields = ['team', 'owner', 'tag', 'project', 'status']
