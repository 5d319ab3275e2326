"""
Service layer for reports app.

Reports over the task set:
- completed_since: completed tasks updated within a trailing window
- pending_workload: total estimated days and count of unfinished tasks
- grouped_completions: completed tasks grouped by team, owner or project

Reports never fail on zero rows; they return zero-valued results.
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from django.db import models
from django.utils import timezone

from apps.tasks.exceptions import InvalidArgument
from apps.tasks.filters import TaskPredicate
from apps.tasks.models import Task
from apps.tasks.services import TaskQueryService

logger = logging.getLogger(__name__)


class GroupBy(models.TextChoices):
    TEAM = 'team', 'Team'
    OWNER = 'owner', 'Owner'
    PROJECT = 'project', 'Project'

    @property
    def key_attr(self):
        """Task attribute holding this dimension's identifier."""
        return f'{self.value}_id'


def parse_group_by(value):
    """
    Return ``value`` as a GroupBy member.

    Raises:
        InvalidArgument: carrying the list of valid groupBy values
    """
    try:
        return GroupBy(value)
    except ValueError:
        raise InvalidArgument('groupBy', value, GroupBy.values)


@dataclass
class PendingWorkload:
    total_days: float = 0
    task_count: int = 0

    def as_dict(self):
        return {'totalDays': self.total_days, 'taskCount': self.task_count}


@dataclass
class CompletionGroup:
    key: Optional[int]
    tasks: List[Task] = field(default_factory=list)

    @property
    def completed_task_count(self):
        return len(self.tasks)


@dataclass
class GroupedCompletions:
    grouped_by: GroupBy
    results: List[CompletionGroup]

    @property
    def total_completed(self):
        return sum(group.completed_task_count for group in self.results)


class ReportEngine:
    """
    Derived reports over the task set of a task store.

    ``clock`` returns the current time; it defaults to ``timezone.now``.
    """

    def __init__(self, store, clock=timezone.now):
        self.queries = TaskQueryService(store)
        self.clock = clock

    def _completed_tasks(self):
        return self.queries.query_tasks(TaskPredicate(status=Task.Status.COMPLETED))

    def completed_since(self, window_days=7):
        """
        Completed tasks whose ``updated_at`` is within the last ``window_days``.

        The lower bound is inclusive. Any edit to a completed task keeps it
        in the window, since ``updated_at`` tracks the last modification
        rather than the completion time.
        """
        if window_days < 0:
            raise InvalidArgument('windowDays', window_days, [])

        try:
            since = self.clock() - timedelta(days=window_days)
        except OverflowError:
            # Window reaches past the earliest representable datetime
            since = None

        tasks = [
            task for task in self._completed_tasks()
            if since is None or task.updated_at >= since
        ]
        logger.debug(f'{len(tasks)} tasks completed within {window_days} days')
        return tasks

    def pending_workload(self):
        """Sum of ``time_to_complete`` (missing counts as 0) over unfinished tasks."""
        workload = PendingWorkload()
        for task in self.queries.query_tasks():
            if task.status == Task.Status.COMPLETED:
                continue
            workload.task_count += 1
            workload.total_days += task.time_to_complete or 0
        logger.debug(f'Pending workload: {workload}')
        return workload

    def grouped_completions(self, group_by):
        """
        Completed tasks grouped by the identifier of ``group_by``.

        Groups are ordered by descending count; ties keep the order in which
        each group's first task appears in the store (primary key order).
        ``group_by`` is validated before any query runs.
        """
        group_by = parse_group_by(group_by)

        groups = {}
        for task in self._completed_tasks():
            key = getattr(task, group_by.key_attr)
            groups.setdefault(key, CompletionGroup(key=key)).tasks.append(task)

        results = sorted(groups.values(), key=lambda group: -group.completed_task_count)
        logger.debug(f'Grouped {len(results)} {group_by} groups')
        return GroupedCompletions(grouped_by=group_by, results=results)
