"""
Shared fixtures for task tracker tests.
"""

from django.contrib.auth import get_user_model

from apps.accounts.tokens import issue_token
from apps.organization.models import Project, Tag, Team
from apps.tasks.filters import TaskPredicate
from apps.tasks.models import Task


def make_user(name='Jane Doe', email=None, password='s3cret-pass'):
    email = email or f"{name.lower().replace(' ', '.')}@example.com"
    return get_user_model().objects.create_user(email=email, password=password, name=name)


def make_task(title='Task', status=Task.Status.TO_DO, tags=(), **fields):
    task = Task.objects.create(title=title, status=status, **fields)
    if tags:
        task.tags.set(tags)
    return task


def set_updated_at(task, when):
    """Backdate updated_at without triggering auto_now."""
    Task.objects.filter(pk=task.pk).update(updated_at=when)
    task.refresh_from_db()
    return task


def auth_header(user):
    return {'HTTP_AUTHORIZATION': f'Bearer {issue_token(user)}'}


class SampleData:
    """Two teams, two owners, two projects, two tags and a handful of tasks."""

    def __init__(self):
        self.alpha = Team.objects.create(name='Alpha')
        self.beta = Team.objects.create(name='Beta')
        self.apollo = Project.objects.create(name='Apollo')
        self.gemini = Project.objects.create(name='Gemini')
        self.urgent = Tag.objects.create(name='Urgent')
        self.backend = Tag.objects.create(name='Backend')
        self.jane = make_user('Jane Doe')
        self.john = make_user('John Roe')

        self.t1 = make_task('Design schema', Task.Status.COMPLETED, team=self.alpha,
                            owner=self.jane, project=self.apollo, tags=[self.backend],
                            time_to_complete=3)
        self.t2 = make_task('Write API', Task.Status.IN_PROGRESS, team=self.alpha,
                            owner=self.john, project=self.apollo,
                            tags=[self.backend, self.urgent], time_to_complete=5)
        self.t3 = make_task('Fix login', Task.Status.BLOCKED, team=self.beta,
                            owner=self.jane, project=self.gemini, tags=[self.urgent],
                            time_to_complete=1.5)
        self.t4 = make_task('Ship release', Task.Status.COMPLETED, team=self.beta,
                            owner=self.john, project=self.gemini)
        self.t5 = make_task('Plan sprint', Task.Status.COMPLETED, team=self.beta,
                            owner=self.jane, project=self.apollo, time_to_complete=2)
        self.t6 = make_task('Triage inbox', Task.Status.TO_DO)

    @property
    def tasks(self):
        return [self.t1, self.t2, self.t3, self.t4, self.t5, self.t6]


class FakeEntity:
    def __init__(self, pk, name):
        self.pk = pk
        self.name = name


class RecordingStore:
    """
    In-memory task store that records every call.

    ``entities`` maps kind -> {name: pk}. Tasks are any objects with the
    attributes the predicate inspects.
    """

    def __init__(self, entities=None, tasks=()):
        self.entities = entities or {}
        self.tasks = list(tasks)
        self.entity_lookups = []
        self.task_queries = []

    def find_entity_by_name(self, kind, name):
        self.entity_lookups.append((str(kind), name))
        pk = self.entities.get(str(kind), {}).get(name)
        return FakeEntity(pk, name) if pk is not None else None

    def find_tasks(self, predicate=None):
        predicate = predicate or TaskPredicate()
        self.task_queries.append(predicate)
        return [task for task in self.tasks if _matches(predicate, task)]


def _matches(predicate, task):
    if predicate.team_id is not None and task.team_id != predicate.team_id:
        return False
    if predicate.owner_id is not None and task.owner_id != predicate.owner_id:
        return False
    if predicate.project_id is not None and task.project_id != predicate.project_id:
        return False
    if predicate.status is not None and task.status != predicate.status:
        return False
    return True


class FakeTask:
    def __init__(self, pk, status, updated_at=None, time_to_complete=None,
                 team_id=None, owner_id=None, project_id=None):
        self.pk = pk
        self.status = status
        self.updated_at = updated_at
        self.time_to_complete = time_to_complete
        self.team_id = team_id
        self.owner_id = owner_id
        self.project_id = project_id
